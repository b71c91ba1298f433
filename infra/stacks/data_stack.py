"""
Data Stack (Serverless)

DynamoDB (On-Demand), SSM Parameter Store
- Empresas Table (企業マスタ、NRO_RUC の GSI 付き)
- テーブル名・インデックス名のパラメータ
"""
from aws_cdk import (
    NestedStack,
    RemovalPolicy,
    aws_dynamodb as dynamodb,
    aws_ssm as ssm,
)
from constructs import Construct

TABLE_NAME = 'GRUPO5.FACT_EMPRESAS'
INDEX_NAME = 'NRO_RUC-index'


class DataStack(NestedStack):
    """サーバレスデータ層のリソースを管理するスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        stage: str = 'dev',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # DynamoDB Tables
        # =================================================================

        self.empresas_table = dynamodb.Table(
            self, 'EmpresasTable',
            table_name=TABLE_NAME,
            partition_key=dynamodb.Attribute(
                name='ID_EMPRESA',
                type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
            encryption=dynamodb.TableEncryption.AWS_MANAGED,
            removal_policy=RemovalPolicy.RETAIN,
        )

        # GSI for RUC lookups
        self.empresas_table.add_global_secondary_index(
            index_name=INDEX_NAME,
            partition_key=dynamodb.Attribute(
                name='NRO_RUC',
                type=dynamodb.AttributeType.STRING
            ),
            projection_type=dynamodb.ProjectionType.ALL,
        )

        # =================================================================
        # SSM Parameters
        # =================================================================

        self.table_name_parameter = ssm.StringParameter(
            self, 'TableNameParameter',
            parameter_name=f'/{stage}/rucsystem/database/table-name',
            string_value=self.empresas_table.table_name,
        )

        self.index_name_parameter = ssm.StringParameter(
            self, 'IndexNameParameter',
            parameter_name=f'/{stage}/rucsystem/database/index-name',
            string_value=INDEX_NAME,
        )
