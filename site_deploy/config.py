import os
from dataclasses import dataclass

import boto3
from dotenv import find_dotenv, load_dotenv

# Website origins and ACM lookups are pinned to us-east-1
AWS_REGION = 'us-east-1'


@dataclass(frozen=True)
class ClientConfig:
    aws_access_key_id: str
    aws_secret_access_key: str
    region: str = AWS_REGION

    @classmethod
    def from_env(cls):
        """Reads credentials from the environment, filling gaps from a .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        values = {
            'AWS_ACCESS_KEY_ID': os.environ.get('AWS_ACCESS_KEY_ID'),
            'AWS_SECRET_ACCESS_KEY': os.environ.get('AWS_SECRET_ACCESS_KEY')
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ValueError(f"Missing AWS credentials: {', '.join(missing)}")

        return cls(
            aws_access_key_id=values['AWS_ACCESS_KEY_ID'],
            aws_secret_access_key=values['AWS_SECRET_ACCESS_KEY']
        )

    def session(self):
        return boto3.Session(
            aws_access_key_id=self.aws_access_key_id,
            aws_secret_access_key=self.aws_secret_access_key,
            region_name=self.region
        )
