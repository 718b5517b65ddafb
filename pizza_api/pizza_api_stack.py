#API Gateway > Lambda (in-memory pizza menu)

import os

from aws_cdk import (
    CfnOutput,
    Duration,
    Stack,
    aws_iam as iam,
    aws_lambda as _lambda,
    Tags,
    aws_apigateway as apigw
)
from constructs import Construct
from aws_cdk.aws_lambda import Tracing

LAMBDA_ASSET_DIR = os.path.join(os.path.dirname(__file__), "lambda")
POWERTOOLS_LAYER_ARN = "arn:aws:lambda:{region}:017000801446:layer:AWSLambdaPowertoolsPythonV3-python312-x86_64:7"


class PizzaApiStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, *, department: str = "pizza", log_level: str = "INFO", **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Create a role for the Lambda function
        role = iam.Role(
            self, "PizzaFunctionRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            description="Role for the pizza lookup function"
        )
        Tags.of(role).add("department", department)

        # Allow the Lambda function to write to CloudWatch Logs
        role.add_to_policy(iam.PolicyStatement(
            actions=["logs:CreateLogGroup", "logs:CreateLogStream", "logs:PutLogEvents"],
            resources=["arn:aws:logs:*:*:*"]
        ))

        powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "layer",
            POWERTOOLS_LAYER_ARN.format(region=Stack.of(self).region)
        )

        get_pizza_function = _lambda.Function(self, 'GetPizzaFunction',
            runtime=_lambda.Runtime.PYTHON_3_12,
            code=_lambda.Code.from_asset(LAMBDA_ASSET_DIR),
            handler='get_pizza.lambda_handler',
            role=role,
            tracing=Tracing.ACTIVE,
            timeout=Duration.seconds(10),
            memory_size=128,
            layers=[powertools_layer],
            environment={
                'POWERTOOLS_SERVICE_NAME': 'pizza-api',
                'POWERTOOLS_LOG_LEVEL': log_level,
            }
        )
        Tags.of(get_pizza_function).add("department", department)

        # Create rest api
        pizza_api = apigw.RestApi(self, "PizzaApi",
            rest_api_name="pizza API",
            description="Looks up a pizza on the menu by name."
        )
        Tags.of(pizza_api).add("department", department)

        pizza = pizza_api.root.add_resource("pizza")
        get_pizza = pizza.add_resource("{pizza_name}")

        get_pizza.add_method(
            "GET",
            apigw.LambdaIntegration(get_pizza_function, proxy=True),
            request_parameters={
                "method.request.path.pizza_name": True,
            }
        )

        #Output
        CfnOutput(self, "PizzaApiUrl", value=pizza_api.url_for_path("/pizza"))
