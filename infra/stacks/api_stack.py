"""
API Stack

API Gateway (REST) for the RUC front functions.
"""
from aws_cdk import (
    NestedStack,
    aws_apigateway as apigw,
    aws_lambda as lambda_,
)
from constructs import Construct


class ApiStack(NestedStack):
    """API Gateway スタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        consultar_ruc_fn: lambda_.IFunction,
        validar_ruc_fn: lambda_.IFunction,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # REST API
        # =================================================================

        self.api = apigw.RestApi(
            self, 'RucApi',
            rest_api_name='ruc-system-api',
            description='RUC System REST API (Serverless)',
            deploy_options=apigw.StageOptions(
                stage_name='v1',
                logging_level=apigw.MethodLoggingLevel.INFO,
                metrics_enabled=True,
                throttling_rate_limit=100,
                throttling_burst_limit=50,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=['GET', 'OPTIONS'],
                allow_headers=['Content-Type'],
            ),
        )

        # =================================================================
        # Empresas Endpoints
        # =================================================================

        empresas_resource = self.api.root.add_resource('empresas')

        # GET /empresas - 全件
        empresas_resource.add_method(
            'GET',
            apigw.LambdaIntegration(consultar_ruc_fn),
        )

        # GET /empresas/{nroRuc} - RUC 指定
        empresa_resource = empresas_resource.add_resource('{nroRuc}')
        empresa_resource.add_method(
            'GET',
            apigw.LambdaIntegration(validar_ruc_fn),
        )

        # =================================================================
        # Outputs
        # =================================================================

        self.api_url = self.api.url
