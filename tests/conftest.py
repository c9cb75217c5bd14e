# Katalog główny repozytorium na sys.path, testy działają bez instalacji pakietu
import os
import sys

_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

import pytest

from iam_policy import Policy

VERSION = "2012-10-17"

# len('{"Version":"2012-10-17","Statement":[') + len(']}')
ENVELOPE_OVERHEAD = 39

# len('{"Sid":"","Effect":"Allow"}')
_SIZED_BASE = 27


def sized_statement(size: int, tag: str) -> dict:
    """Instrukcja, której kompaktowy JSON ma dokładnie `size` znaków."""
    pad = size - _SIZED_BASE - len(tag)
    assert pad >= 0, f"size {size} too small for tag {tag!r}"
    return {"Sid": tag + "x" * pad, "Effect": "Allow"}


def s3_statement(bucket: str, action: str = "s3:GetObject") -> dict:
    return {
        "Effect": "Allow",
        "Action": [action],
        "Resource": f"arn:aws:s3:::{bucket}/*",
    }


@pytest.fixture
def sized():
    return sized_statement


@pytest.fixture
def make_policy():
    def _make(statements, id=None):
        return Policy(version=VERSION, statements=list(statements), id=id)
    return _make


@pytest.fixture
def small_statements():
    # Każda: 80 znaków, koszt solo 119.
    return [
        s3_statement("bucket1"),
        s3_statement("bucket2"),
        s3_statement("bucket3"),
        s3_statement("bucket4"),
    ]


@pytest.fixture
def large_statement():
    # 439 znaków, koszt solo 478.
    return {
        "Sid": "Large",
        "Effect": "Allow",
        "Action": "s3:*",
        "Resource": [f"arn:aws:s3:::bucket-{i:02d}/*" for i in range(14)],
    }


@pytest.fixture
def s3_ec2_policy():
    """Pięć dużych instrukcji; żadne dwie nie mieszczą się razem w 500 znakach."""
    def bucket_access(n):
        return {
            "Sid": f"S3BucketAccess{n}",
            "Effect": "Allow",
            "Action": [
                "s3:GetObject",
                "s3:PutObject",
                "s3:DeleteObject",
                "s3:GetObjectVersion",
                "s3:PutObjectAcl",
                "s3:GetObjectAcl",
            ],
            "Resource": [
                f"arn:aws:s3:::production-data-bucket-{n}/*",
                f"arn:aws:s3:::staging-data-bucket-{n}/*",
                f"arn:aws:s3:::development-data-bucket-{n}/*",
            ],
        }

    return {
        "Version": VERSION,
        "Statement": [
            bucket_access(1),
            bucket_access(2),
            bucket_access(3),
            {
                "Sid": "S3BucketList",
                "Effect": "Allow",
                "Action": [
                    "s3:ListBucket",
                    "s3:ListBucketVersions",
                    "s3:GetBucketLocation",
                    "s3:GetBucketAcl",
                    "s3:GetBucketVersioning",
                ],
                "Resource": [
                    "arn:aws:s3:::production-data-bucket-1",
                    "arn:aws:s3:::staging-data-bucket-1",
                    "arn:aws:s3:::development-data-bucket-1",
                    "arn:aws:s3:::production-data-bucket-2",
                    "arn:aws:s3:::staging-data-bucket-2",
                    "arn:aws:s3:::development-data-bucket-2",
                ],
            },
            {
                "Sid": "EC2InstanceManagement",
                "Effect": "Allow",
                "Action": [
                    "ec2:DescribeInstances",
                    "ec2:DescribeInstanceStatus",
                    "ec2:DescribeInstanceAttribute",
                    "ec2:StartInstances",
                    "ec2:StopInstances",
                    "ec2:RebootInstances",
                    "ec2:TerminateInstances",
                    "ec2:RunInstances",
                    "ec2:ModifyInstanceAttribute",
                ],
                "Resource": "*",
                "Condition": {
                    "StringEquals": {
                        "ec2:Region": ["us-east-1", "us-west-2", "eu-west-1"],
                    },
                },
            },
        ],
    }
