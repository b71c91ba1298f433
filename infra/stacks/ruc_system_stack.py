"""
RUC System Main Stack (Serverless)

API Gateway → フロント Lambda → バックエンド Lambda → DynamoDB。
テーブル名・インデックス名は SSM Parameter Store 経由で渡す。
"""
from aws_cdk import (
    Stack,
    CfnOutput,
)
from constructs import Construct

from infra.stacks.data_stack import DataStack
from infra.stacks.compute_stack import ComputeStack
from infra.stacks.api_stack import ApiStack


class RucSystemStack(Stack):
    """RUC System のメインスタック (Serverless)。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        stage: str = 'dev',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Data Stack (DynamoDB, SSM Parameters)
        data_stack = DataStack(self, 'Data', stage=stage)

        # Compute Stack (Lambda Functions)
        compute_stack = ComputeStack(
            self, 'Compute',
            empresas_table=data_stack.empresas_table,
            table_name_parameter=data_stack.table_name_parameter,
            index_name_parameter=data_stack.index_name_parameter,
        )

        # API Stack (API Gateway)
        api_stack = ApiStack(
            self, 'Api',
            consultar_ruc_fn=compute_stack.consultar_ruc_fn,
            validar_ruc_fn=compute_stack.validar_ruc_fn,
        )

        # Outputs
        CfnOutput(self, 'ApiEndpoint', value=api_stack.api_url)
        CfnOutput(self, 'EmpresasTableName', value=data_stack.empresas_table.table_name)
        CfnOutput(self, 'EmpresasBdFunctionName', value=compute_stack.empresas_bd_fn.function_name)
