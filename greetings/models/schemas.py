"""
Greetings -- Pydantic Data Models

The record format of the JSON data source, plus every request and
response the HTTP layer exchanges. The same SisterRecord model parses
the data file, so a record that would not serialize cleanly never makes
it into the store.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Records -- one entry of the JSON data source
# ---------------------------------------------------------------------------

class SisterRecord(BaseModel):
    """One person's personalized page content.

    'name' is the lookup key (compared lower-cased and trimmed). The other
    fields are displayed as-is on the greeting page."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(
        description="Name used to look the record up. Case and surrounding spaces are ignored.",
        examples=["Priya"],
    )
    greeting: str = Field(
        default="",
        description="Short salutation shown as the page heading.",
        examples=["Happy Raksha Bandhan, Priya!"],
    )
    message: str = Field(
        default="",
        description="Personalized body text. Line breaks are kept when rendered.",
        examples=["To the best sister anyone could ask for."],
    )
    images: list[str] = Field(
        default_factory=list,
        description="Image URLs shown under the message. Blank entries are skipped.",
        examples=[["https://images.example.com/priya/rakhi-2024.jpg"]],
    )

    @field_validator("greeting", "message", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @field_validator("images", mode="before")
    @classmethod
    def _loose_images(cls, value):
        # a missing or non-list images field means nothing to show
        if not isinstance(value, list):
            return []
        return [url for url in value if isinstance(url, str)]


# ---------------------------------------------------------------------------
# Store loads
# ---------------------------------------------------------------------------

class LoadResult(BaseModel):
    """Outcome of one load of the data source.

    ok=True carries the full record list. ok=False carries the reason and
    an empty list; the store is empty afterwards."""

    ok: bool
    records: list[SisterRecord] = Field(default_factory=list)
    error: str | None = None
    source: str


class LoadResponse(BaseModel):
    """What POST /v1/sisters/reload returns. Records are counted, not echoed."""

    ok: bool = Field(description="True if the data source loaded cleanly.", examples=[True])
    count: int = Field(description="Records now in the store.", examples=[3])
    error: str | None = Field(
        default=None,
        description="Why the load failed, if it did.",
        examples=["HTTP 500 from http://localhost:8000/data.json"],
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class ValidationResult(BaseModel):
    """Result of checking a candidate record before it is accepted.

    Every check runs, so 'errors' lists all problems at once, in check order."""

    valid: bool = Field(description="True when 'errors' is empty.", examples=[False])
    errors: list[str] = Field(
        default_factory=list,
        description="One human-readable message per failed check.",
        examples=[["Greeting is required", "Image URL 2 is not valid"]],
    )


# ---------------------------------------------------------------------------
# Lookup / probe responses
# ---------------------------------------------------------------------------

class ExistsResponse(BaseModel):
    name: str = Field(description="The name exactly as it was asked for.", examples=["  priya "])
    exists: bool = Field(examples=[True])


class ImageProbeResponse(BaseModel):
    url: str = Field(examples=["https://images.example.com/priya/rakhi-2024.jpg"])
    usable: bool = Field(
        description="True if the URL answered with an image within the probe timeout.",
        examples=[True],
    )
