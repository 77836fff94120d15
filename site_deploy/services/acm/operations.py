from concurrent.futures import ThreadPoolExecutor

# CloudFront only accepts ACM certificates issued in us-east-1
ACM_REGION = 'us-east-1'
MINIMUM_PROTOCOL_VERSION = 'TLSv1.1_2016'
SSL_SUPPORT_METHOD = 'sni-only'


class ACMOperations:
    def __init__(self, session):
        self.acm_client = session.client('acm', region_name=ACM_REGION)

    def list_issued_certificates(self):
        # Only the first page is read
        response = self.acm_client.list_certificates(CertificateStatuses=['ISSUED'])
        return response['CertificateSummaryList']

    def describe_certificate(self, certificate_arn):
        response = self.acm_client.describe_certificate(CertificateArn=certificate_arn)
        return response['Certificate']

    def describe_certificates(self, summaries):
        if not summaries:
            return []

        arns = [summary['CertificateArn'] for summary in summaries]
        with ThreadPoolExecutor(max_workers=len(arns)) as executor:
            return list(executor.map(self.describe_certificate, arns))

    def find_certificate(self, domain_name):
        certificates = self.describe_certificates(self.list_issued_certificates())
        for certificate in certificates:
            if certificate['DomainName'] == domain_name:
                return certificate
        return None

    def get_viewer_certificate(self, bucket_name):
        """
        Builds the ViewerCertificate for a distribution serving `bucket_name`.

        The bucket name is expected to be the site's domain. An issued ACM
        certificate whose DomainName equals it exactly is used when one exists,
        otherwise the distribution falls back to the default CloudFront certificate.
        """
        certificate = self.find_certificate(bucket_name)

        if certificate is None:
            print('Could not find matching ACM certificate, defaulting to CloudFront certificate')
            return {
                'CloudFrontDefaultCertificate': True,
                'MinimumProtocolVersion': MINIMUM_PROTOCOL_VERSION,
                'SSLSupportMethod': SSL_SUPPORT_METHOD
            }

        print('Found matching ACM certificate')
        return {
            'CloudFrontDefaultCertificate': False,
            'ACMCertificateArn': certificate['CertificateArn'],
            'MinimumProtocolVersion': MINIMUM_PROTOCOL_VERSION,
            'SSLSupportMethod': SSL_SUPPORT_METHOD
        }
