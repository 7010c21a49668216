# src/patchnotes_bot/config.py
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Common
    discord_token: Optional[str] = None
    # Bot branding / guilds
    bot_status: str | None = "Star Citizen patch notes"
    guild_ids: list[int] = []  # optional, for guild-specific command sync
    # Admin roles allowed to use /setup and /reset (IDs or names)
    admin_role_ids: list[int] = []
    admin_role_names: list[str] = []

    # Monitored forum
    forum_url: str = "https://robertsspaceindustries.com/spectrum/community/SC/forum/190048"
    forum_base_url: str = "https://robertsspaceindustries.com"
    thread_link_selector: str = "a.thread-subject"
    content_selector: str = "div.content-main"
    # Polling / browser
    poll_interval_sec: float = 60.0
    navigation_timeout_sec: float = 60.0  # page.goto / wait_for_selector
    # Hard bound around one scraping call; default covers goto + selector wait + launch
    scrape_timeout_sec: Optional[float] = None
    browser_args: list[str] = ["--no-sandbox", "--disable-setuid-sandbox"]

    # Generation (OpenAI via llama_index); API keys come from each server's /setup
    llm_model: str = "gpt-4o-mini"
    llm_max_tokens: int = 3500
    temperature: float = 0.1
    llm_api_base: Optional[str] = None  # OpenAI-compatible endpoint
    generation_system_prompt: Optional[str] = None
    generation_instruction: Optional[str] = None

    # Destination registry document
    config_file: str = "data/config.json"

    # Delivery
    max_chunk_len: int = 2000  # Discord message limit
    new_post_title: str = "New Star Citizen Patch Notes"
    latest_post_title: str = "Latest Star Citizen Patch Notes"

    # Health HTTP server (for k8s probes)
    health_http_port: Optional[int] = None  # e.g., 8080 to enable /healthz

    @property
    def scrape_timeout(self) -> float:
        if self.scrape_timeout_sec:
            return float(self.scrape_timeout_sec)
        return 2 * self.navigation_timeout_sec + 30.0

    class Config:
        env_prefix = "APP_"
        extra = "ignore"

settings = Settings()
