#!/usr/bin/env python3
import os

import aws_cdk as cdk

from pizza_api.pizza_api_stack import PizzaApiStack


app = cdk.App()
PizzaApiStack(app, "PizzaApiStack",
    log_level=app.node.try_get_context("log_level") or "INFO",
    env=cdk.Environment(
        account=os.getenv('CDK_DEFAULT_ACCOUNT'),
        region=os.getenv('CDK_DEFAULT_REGION', 'eu-west-2')
    ),
)

app.synth()
