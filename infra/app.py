#!/usr/bin/env python3
"""
CDK Application Entry Point

RUC System - Lambda + DynamoDB + SSM Parameter Store のサーバレス構成をデプロイ。
"""
import os
import aws_cdk as cdk

from infra.stacks.ruc_system_stack import RucSystemStack

app = cdk.App()

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=os.environ.get('CDK_DEFAULT_REGION', 'us-east-1'),
)

RucSystemStack(
    app,
    'RucSystemStack',
    stage=app.node.try_get_context('stage') or 'dev',
    env=env,
    description='RUC System - company lookup (API Gateway + Lambda + DynamoDB)',
)

app.synth()
