"""Request bodies accepted by the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class StationRequest(BaseModel):
    name: str


class LineRequest(BaseModel):
    """Body for creating a line; the stations and distance form its first section."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    color: str
    up_station_id: int = Field(alias="upStationId")
    down_station_id: int = Field(alias="downStationId")
    distance: int


class LineUpdateRequest(BaseModel):
    name: str
    color: str


class SectionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    up_station_id: int = Field(alias="upStationId")
    down_station_id: int = Field(alias="downStationId")
    distance: int
