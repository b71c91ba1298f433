"""Domain Exceptions"""


class RucLookupError(Exception):
    """
    RUC 検索サービスの基底例外

    各層の例外（設定取得・データアクセス・リクエスト検証など）はこれを継承する。
    """

    pass
