"""Pytest fixtures for site-deploy tests."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


class FakeSession:
    """Stands in for boto3.Session, handing out one MagicMock client per service."""

    def __init__(self):
        self.clients = {}
        self.regions = {}
        # Every client hangs off one parent so calls across services keep their order
        self.calls = MagicMock()

    def client(self, service_name, region_name=None):
        if service_name not in self.clients:
            client = MagicMock()
            self.calls.attach_mock(client, service_name)
            self.clients[service_name] = client
        self.regions[service_name] = region_name
        return self.clients[service_name]


def service_calls(session: FakeSession) -> list[str]:
    """Names of the AWS calls made through the session, in the order they happened."""
    return [c[0] for c in session.calls.method_calls]


def client_error(code: str, operation: str) -> ClientError:
    """Build a ClientError the way botocore raises them."""
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def s3_client(session):
    return session.client("s3")


@pytest.fixture
def cloudfront_client(session):
    return session.client("cloudfront")


@pytest.fixture
def acm_client(session):
    return session.client("acm", region_name="us-east-1")


@pytest.fixture
def no_certificates(acm_client):
    acm_client.list_certificates.return_value = {"CertificateSummaryList": []}
    return acm_client


@pytest.fixture
def certificates(acm_client):
    """Three issued certificates, one of them for example.com."""
    details = {
        "arn:aws:acm:us-east-1:123456789012:certificate/aaa": "blog.example.org",
        "arn:aws:acm:us-east-1:123456789012:certificate/bbb": "example.com",
        "arn:aws:acm:us-east-1:123456789012:certificate/ccc": "*.example.com",
    }
    acm_client.list_certificates.return_value = {
        "CertificateSummaryList": [
            {"CertificateArn": arn, "DomainName": domain}
            for arn, domain in details.items()
        ]
    }
    acm_client.describe_certificate.side_effect = lambda CertificateArn: {
        "Certificate": {
            "CertificateArn": CertificateArn,
            "DomainName": details[CertificateArn],
            "Status": "ISSUED",
        }
    }
    return acm_client


def distribution(distribution_id: str, *origin_ids: str) -> dict:
    return {
        "Id": distribution_id,
        "Origins": {
            "Quantity": len(origin_ids),
            "Items": [
                {"Id": origin_id, "DomainName": origin_id.removeprefix("S3-Website-")}
                for origin_id in origin_ids
            ],
        },
    }
