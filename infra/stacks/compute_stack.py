"""
Lambda Stack (Serverless Compute)

Lambda Functions:
- empresas_bd (バックエンド: SSM + DynamoDB)
- consultar_ruc (フロント: 全件)
- validar_ruc (フロント: nroRuc 指定)
"""
from aws_cdk import (
    NestedStack,
    BundlingOptions,
    Duration,
    aws_lambda as lambda_,
    aws_dynamodb as dynamodb,
    aws_ssm as ssm,
    aws_logs as logs,
)
from constructs import Construct

# 実行時依存 (boto3 はランタイムに同梱)
RUNTIME_REQUIREMENTS = "structlog pydantic pydantic-settings"


class ComputeStack(NestedStack):
    """Lambda ベースのサーバレスコンピュートスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        empresas_table: dynamodb.Table,
        table_name_parameter: ssm.StringParameter,
        index_name_parameter: ssm.StringParameter,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # src パッケージと依存ライブラリを一つのアセットにまとめる
        code = lambda_.Code.from_asset(
            '.',
            exclude=['cdk.out', '.venv', '.git', '**/__pycache__'],
            bundling=BundlingOptions(
                image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    'bash', '-c',
                    f'pip install {RUNTIME_REQUIREMENTS} -t /asset-output '
                    '&& cp -r src /asset-output/',
                ],
            ),
        )

        # =================================================================
        # Backend Lambda (empresas_bd)
        # =================================================================

        self.empresas_bd_fn = lambda_.Function(
            self, 'EmpresasBdFn',
            function_name='empresas_bd',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='src.handlers.empresas_bd.handler.lambda_handler',
            code=code,
            memory_size=256,
            timeout=Duration.seconds(30),
            environment={
                'RUC_TABLE_NAME_PARAMETER': table_name_parameter.parameter_name,
                'RUC_INDEX_NAME_PARAMETER': index_name_parameter.parameter_name,
                'RUC_AWS_REGION': self.region,
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        empresas_table.grant_read_data(self.empresas_bd_fn)
        table_name_parameter.grant_read(self.empresas_bd_fn)
        index_name_parameter.grant_read(self.empresas_bd_fn)

        # =================================================================
        # Front Lambdas (consultar_ruc, validar_ruc)
        # =================================================================

        front_environment = {
            'RUC_LOOKUP_FUNCTION_NAME': self.empresas_bd_fn.function_arn,
            'RUC_AWS_REGION': self.region,
        }

        self.consultar_ruc_fn = lambda_.Function(
            self, 'ConsultarRucFn',
            function_name='consultarRuc',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='src.handlers.consultar_ruc.handler.lambda_handler',
            code=code,
            memory_size=128,
            timeout=Duration.seconds(30),
            environment=front_environment,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.validar_ruc_fn = lambda_.Function(
            self, 'ValidarRucFn',
            function_name='validarRuc',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='src.handlers.validar_ruc.handler.lambda_handler',
            code=code,
            memory_size=128,
            timeout=Duration.seconds(30),
            environment=front_environment,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.empresas_bd_fn.grant_invoke(self.consultar_ruc_fn)
        self.empresas_bd_fn.grant_invoke(self.validar_ruc_fn)
