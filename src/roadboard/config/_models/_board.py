"""Board configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from roadboard.config._models._common import BoardLocale


class BoardConfig(BaseModel):
    """Board configuration section.

    Attributes:
        data_file: Roadmap dataset read when no file is given on the command line.
        locale: Locale used to display due dates.
        suggestion_limit: Maximum number of autocomplete suggestions.
        description_max_length: Length at which card descriptions are cut.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    data_file: str = "roadmap-data.json"
    locale: BoardLocale = BoardLocale.EN
    suggestion_limit: int = Field(default=10, ge=1, le=100)
    description_max_length: int = Field(default=300, ge=1)
