import os
from botocore.exceptions import ClientError
from tqdm import tqdm

WEBSITE_DOCUMENT = 'index.html'

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".txt": "text/plain",
    ".ico": "image/vnd.microsoft.icon",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".woff": "font/woff",
    ".woff2": "font/woff2"
}


def collect_site_files(folder_path):
    """Returns (path, key) pairs for every file under folder_path, in walk order."""
    if not os.path.isdir(folder_path):
        raise FileNotFoundError(f'Folder {folder_path} does not exist')

    site_files = []
    for root, dirs, files in os.walk(folder_path):
        dirs.sort()
        for file in sorted(files):
            file_path = os.path.join(root, file)
            s3_key = os.path.relpath(file_path, folder_path).replace(os.sep, '/')
            site_files.append((file_path, s3_key))
    return site_files


def upload_extra_args(s3_key):
    _, ext = os.path.splitext(s3_key)
    extra_args = {'ContentType': MIME_TYPES.get(ext.lower(), "application/octet-stream")}
    # The website document answers every unknown path, so it must never go stale
    if s3_key == WEBSITE_DOCUMENT:
        extra_args['CacheControl'] = 'no-cache'
    return extra_args


class S3Operations:
    def __init__(self, session):
        self.s3_client = session.client('s3')

    def create_website_bucket(self, bucket_name):
        """
        Creates a public-read bucket served as a website. Both the index and the
        error document are index.html, so unknown paths fall back to the app root.
        """
        try:
            self.s3_client.create_bucket(Bucket=bucket_name, ACL='public-read')
        except ClientError as e:
            print(f'Error creating bucket {bucket_name}: {e}')
            raise

        # No rollback: a failure here leaves the bucket created but unconfigured
        self.s3_client.put_bucket_website(
            Bucket=bucket_name,
            WebsiteConfiguration={
                'ErrorDocument': {
                    'Key': WEBSITE_DOCUMENT
                },
                'IndexDocument': {
                    'Suffix': WEBSITE_DOCUMENT
                }
            }
        )

        print(f'Created bucket {bucket_name}')

    def upload_files(self, bucket_name, folder_path):
        site_files = collect_site_files(folder_path)

        with tqdm(site_files, unit='file') as pbar:
            for file_path, s3_key in pbar:
                pbar.set_description(f'Uploading {s3_key}')
                try:
                    self.s3_client.upload_file(file_path, bucket_name, s3_key, ExtraArgs=upload_extra_args(s3_key))
                except ClientError as e:
                    print(f'\nError uploading {file_path}: {e}')
                    raise

        print(f'Uploaded {len(site_files)} files to {bucket_name}')
        return len(site_files)
