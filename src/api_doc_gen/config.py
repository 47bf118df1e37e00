"""Runtime settings, read from the environment or a local .env file."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from api_doc_gen.generator.html import DEFAULT_GENERATOR_NAME
from api_doc_gen.parser.examples import MAX_EXAMPLE_DEPTH


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="APIDOC_", env_file=".env", extra="ignore")

    max_example_depth: int = Field(default=MAX_EXAMPLE_DEPTH, ge=1)
    generator_name: str = DEFAULT_GENERATOR_NAME
    output_dir: Path = Path("./out")


settings = Settings()
