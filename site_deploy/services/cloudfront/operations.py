import time

from site_deploy.services.acm.operations import ACMOperations

S3_WEBSITE_SUFFIX = 's3-website.us-east-1.amazonaws.com'


def caller_reference():
    return str(int(time.time() * 1000))


def website_origin(bucket_name):
    domain_name = f'{bucket_name}.{S3_WEBSITE_SUFFIX}'
    return domain_name, f'S3-Website-{domain_name}'


class CloudFrontOperations:
    def __init__(self, session):
        self.cloudfront_client = session.client('cloudfront')
        self.acm_ops = ACMOperations(session)

    def get_existing_distribution(self, origin_id):
        distributions = self.cloudfront_client.list_distributions()
        # Only the first page is read
        for distribution in distributions['DistributionList'].get('Items', []):
            for origin in distribution['Origins']['Items']:
                if origin['Id'] == origin_id:
                    return distribution
        return None

    def create_invalidation(self, distribution_id):
        self.cloudfront_client.create_invalidation(
            DistributionId=distribution_id,
            InvalidationBatch={
                'CallerReference': caller_reference(),
                'Paths': {
                    'Quantity': 1,
                    'Items': ['/*']
                }
            }
        )

    def create_distribution(self, bucket_name, origin_domain_name, origin_id, viewer_certificate):
        response = self.cloudfront_client.create_distribution(
            DistributionConfig={
                'CallerReference': caller_reference(),
                'Comment': '',
                'Enabled': True,
                'Origins': {
                    'Quantity': 1,
                    'Items': [
                        {
                            'Id': origin_id,
                            'DomainName': origin_domain_name,
                            # Website endpoints only serve plain HTTP
                            'CustomOriginConfig': {
                                'HTTPPort': 80,
                                'HTTPSPort': 443,
                                'OriginProtocolPolicy': 'http-only'
                            }
                        }
                    ]
                },
                'Aliases': {
                    'Quantity': 1,
                    'Items': [bucket_name]
                },
                'DefaultCacheBehavior': {
                    'TargetOriginId': origin_id,
                    'ForwardedValues': {
                        'QueryString': False,
                        'Cookies': {
                            'Forward': 'none'
                        }
                    },
                    'TrustedSigners': {
                        'Enabled': False,
                        'Quantity': 0
                    },
                    'MinTTL': 0,
                    'DefaultTTL': 86400,
                    'MaxTTL': 31536000,
                    'ViewerProtocolPolicy': 'redirect-to-https',
                    'Compress': True,
                    'AllowedMethods': {
                        'Quantity': 2,
                        'Items': ['GET', 'HEAD'],
                        'CachedMethods': {
                            'Quantity': 2,
                            'Items': ['GET', 'HEAD']
                        }
                    }
                },
                'HttpVersion': 'http2',
                'IsIPV6Enabled': True,
                'PriceClass': 'PriceClass_All',
                'ViewerCertificate': viewer_certificate
            }
        )
        return response['Distribution']['Id']

    def invalidate_cloudfront_distro(self, bucket_name):
        """
        Invalidates every path served by the distribution in front of `bucket_name`.

        The distribution is the one with an origin whose id is
        `S3-Website-<bucket_name>.s3-website.us-east-1.amazonaws.com`. When no such
        distribution exists one is created, using an ACM certificate for the bucket's
        domain if there is one.
        """
        origin_domain_name, origin_id = website_origin(bucket_name)

        distribution = self.get_existing_distribution(origin_id)
        if distribution is not None:
            print(f'Found cloudfront distribution with origin id "{origin_id}"')
            print('Invalidating all of its paths')
            self.create_invalidation(distribution['Id'])
            print('Created invalidation')
        else:
            print(f'No cloudfront distribution found with origin id "{origin_id}"')
            print('Creating a cloudfront distribution with such an origin')
            viewer_certificate = self.acm_ops.get_viewer_certificate(bucket_name)
            distribution_id = self.create_distribution(bucket_name, origin_domain_name, origin_id, viewer_certificate)
            print(f'Created cloudfront distribution {distribution_id}')
