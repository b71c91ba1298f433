"""
Lambda Handlers for RUC System

サーバレス構成のエントリポイント:
- empresas_bd (バックエンド: SSM + DynamoDB 検索)
- consultar_ruc (フロント: 全件取得)
- validar_ruc (フロント: パスパラメータ nroRuc で検索)
"""
