from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # CSV output
    csv_delimiter: str = Field(default=",", alias="RESPONSE_CSV_DELIMITER")
    csv_line_terminator: str = Field(default="\n", alias="RESPONSE_CSV_LINE_TERMINATOR")

    @field_validator("csv_delimiter")
    @classmethod
    def single_character_delimiter(cls, v: str) -> str:
        """The csv module only accepts one-character delimiters."""
        if len(v) != 1:
            raise ValueError("RESPONSE_CSV_DELIMITER must be a single character")
        return v

    @field_validator("csv_line_terminator")
    @classmethod
    def known_line_terminator(cls, v: str) -> str:
        if v not in ("\n", "\r\n"):
            raise ValueError("RESPONSE_CSV_LINE_TERMINATOR must be '\\n' or '\\r\\n'")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
