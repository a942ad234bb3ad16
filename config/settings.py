from pydantic_settings import BaseSettings, SettingsConfigDict

PUBLIC_MAINNET_RPC_URL = "https://api.mainnet-beta.solana.com"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Helius (preferred Solana RPC)
    helius_api_key: str = ""
    helius_rpc_url: str = ""

    # Solana RPC (fallback if helius is not configured)
    solana_rpc_url: str = ""
    rpc_timeout_sec: float = 15.0

    # Jupiter Price API v3 (lite endpoint needs no key)
    jupiter_api_key: str = ""
    jupiter_price_url: str = "https://lite-api.jup.ag/price/v3/price"
    enable_price_lookup: bool = True

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_file: str = "logs/scanner_{time:YYYY-MM-DD}.log"  # empty disables the file sink

    @property
    def resolved_rpc_url(self) -> str:
        if self.helius_rpc_url:
            return self.helius_rpc_url
        if self.helius_api_key:
            return f"https://mainnet.helius-rpc.com/?api-key={self.helius_api_key}"
        return self.solana_rpc_url or PUBLIC_MAINNET_RPC_URL


settings = Settings()
