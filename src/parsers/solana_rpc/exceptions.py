class SolanaRpcError(Exception):
    pass


class RpcTransportError(SolanaRpcError):
    """HTTP/network failure that survived all retries."""


class RpcResponseError(SolanaRpcError):
    """Node answered with a JSON-RPC error object or a malformed body."""

    def __init__(self, method: str, code: int | None, message: str) -> None:
        super().__init__(f"{method}: RPC error {code}: {message}")
        self.method = method
        self.code = code
