import os
from typing import Dict, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class ScraperConfig(BaseModel):
    """Transport and browser options shared by a scraper instance."""
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra request headers sent with every GET"
    )
    timeout: Optional[float] = Field(
        None,
        description="Request timeout in seconds; None keeps the httpx default"
    )
    follow_redirects: bool = True
    headless: bool = True
    navigation_timeout: float = Field(
        30000,
        description="Browser navigation timeout in milliseconds"
    )

    @field_validator('timeout', 'navigation_timeout')
    @classmethod
    def validate_positive(cls, v):
        if v is not None and v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @classmethod
    def from_env(cls) -> "ScraperConfig":
        """Build a config from PAGESCRAPER_* environment variables (and .env)."""
        load_dotenv()

        values = {}
        if os.getenv("PAGESCRAPER_TIMEOUT"):
            values["timeout"] = os.getenv("PAGESCRAPER_TIMEOUT")
        if os.getenv("PAGESCRAPER_USER_AGENT"):
            values["headers"] = {"User-Agent": os.getenv("PAGESCRAPER_USER_AGENT")}
        if os.getenv("PAGESCRAPER_FOLLOW_REDIRECTS"):
            values["follow_redirects"] = os.getenv("PAGESCRAPER_FOLLOW_REDIRECTS")
        if os.getenv("PAGESCRAPER_HEADLESS"):
            values["headless"] = os.getenv("PAGESCRAPER_HEADLESS")

        return cls(**values)

    def client_kwargs(self) -> dict:
        """Keyword arguments for httpx.Client / httpx.AsyncClient."""
        kwargs = {
            "headers": self.headers,
            "follow_redirects": self.follow_redirects,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs
