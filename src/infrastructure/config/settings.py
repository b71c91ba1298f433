"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    テーブル名・インデックス名そのものは SSM Parameter Store に置き、
    ここではそのパラメータ名だけを持つ。
    """

    model_config = SettingsConfigDict(
        env_prefix="RUC_",
        env_file=".env",
        case_sensitive=False,
    )

    # Service
    service_name: str = "ruc-system"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    # 未指定なら boto3 が AWS_REGION / AWS_DEFAULT_REGION を使う
    aws_region: str | None = None

    # SSM Parameter Store
    table_name_parameter: str = "/dev/rucsystem/database/table-name"
    index_name_parameter: str = "/dev/rucsystem/database/index-name"

    # Lambda (バックエンド関数名または ARN)
    lookup_function_name: str = "empresas_bd"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
