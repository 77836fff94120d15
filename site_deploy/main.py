import argparse

from site_deploy.config import ClientConfig
from site_deploy.services.s3.operations import S3Operations
from site_deploy.services.cloudfront.operations import CloudFrontOperations


def setup_static_website(session, bucket_name, folder_path, create_bucket=True):
    s3_ops = S3Operations(session)
    cloudfront_ops = CloudFrontOperations(session)

    if create_bucket:
        s3_ops.create_website_bucket(bucket_name)
    s3_ops.upload_files(bucket_name, folder_path)

    cloudfront_ops.invalidate_cloudfront_distro(bucket_name)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='site-deploy',
        description='Provision an S3 website bucket and the CloudFront distribution in front of it'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    create = subparsers.add_parser('create-bucket', help='Create a public website bucket')
    create.add_argument('bucket_name')

    upload = subparsers.add_parser('upload', help='Upload a built site into the bucket')
    upload.add_argument('bucket_name')
    upload.add_argument('folder_path')

    sync = subparsers.add_parser('sync-distribution', help='Invalidate or create the CloudFront distribution')
    sync.add_argument('bucket_name')

    deploy = subparsers.add_parser('deploy', help='Create, upload and sync in one go')
    deploy.add_argument('bucket_name')
    deploy.add_argument('folder_path')
    deploy.add_argument('--skip-create', action='store_true', help='Reuse an existing bucket')

    return parser


def main(argv=None, session=None):
    args = build_parser().parse_args(argv)
    if session is None:
        session = ClientConfig.from_env().session()

    if args.command == 'create-bucket':
        S3Operations(session).create_website_bucket(args.bucket_name)
    elif args.command == 'upload':
        S3Operations(session).upload_files(args.bucket_name, args.folder_path)
    elif args.command == 'sync-distribution':
        CloudFrontOperations(session).invalidate_cloudfront_distro(args.bucket_name)
    elif args.command == 'deploy':
        setup_static_website(session, args.bucket_name, args.folder_path, create_bucket=not args.skip_create)


if __name__ == "__main__":
    main()
