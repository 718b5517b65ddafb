import os
import sys
from dataclasses import dataclass

import pytest

# Lambda imports handler modules from the asset root, so do the same here
LAMBDA_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "pizza_api", "lambda")
sys.path.insert(0, os.path.abspath(LAMBDA_DIR))


@pytest.fixture
def lambda_context():
    @dataclass
    class LambdaContext:
        function_name: str = "GetPizzaFunction"
        function_version: str = "$LATEST"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:eu-west-2:123456789012:function:GetPizzaFunction"
        aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"

        def get_remaining_time_in_millis(self) -> int:
            return 10000

    return LambdaContext()


@pytest.fixture
def api_event():
    def _event(path_parameters):
        return {
            "resource": "/pizza/{pizza_name}",
            "path": "/pizza",
            "httpMethod": "GET",
            "headers": {"Accept": "application/json"},
            "queryStringParameters": None,
            "pathParameters": path_parameters,
            "body": None,
            "isBase64Encoded": False,
        }

    return _event
