import os

class Settings:
    # Upstream page listing hostnames for an IP range
    BASE_URL: str = os.getenv("CIDRHOSTS_BASE_URL", "https://ipinfo.io/ips/")

    # Cache files are written here and removed after each identifier
    CACHE_DIR: str = os.getenv("CIDRHOSTS_CACHE_DIR", ".")

    # Scraping
    REQUEST_TIMEOUT: int = int(os.getenv("CIDRHOSTS_REQUEST_TIMEOUT", "30"))

    # Output
    SILENT: bool = os.getenv("CIDRHOSTS_SILENT", "0").lower() in ("1", "true", "yes")

settings = Settings()
