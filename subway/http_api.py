"""HTTP API for managing stations, lines and line sections."""

import logging
from typing import Generator

from fastapi import Depends, FastAPI, Query, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from subway import __version__
from subway.api.schemas import LineRequest, LineUpdateRequest, SectionRequest, StationRequest
from subway.api.serializers import (
    serialize_line,
    serialize_line_route,
    serialize_station,
)
from subway.config import get_settings
from subway.exceptions import BrokenChainError, DatabaseError, SubwayServiceError, ValidationError
from subway.logging_config import configure_logging
from subway.services.line_section_service import LineSectionService
from subway.services.line_service import LineService
from subway.services.station_service import StationService
from subway.storage.database import get_db

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Subway Line Service",
    description="Stations, lines and the section chains that connect them",
    version=__version__,
)


def get_session() -> Generator[Session, None, None]:
    """Provide one database session per request."""
    with get_db().session() as session:
        yield session


@app.exception_handler(BrokenChainError)
async def broken_chain_handler(request: Request, exc: BrokenChainError) -> JSONResponse:
    logger.error("Broken section chain while handling %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"code": exc.code, "message": "Line data is inconsistent"},
    )


@app.exception_handler(DatabaseError)
async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    logger.error("Database error while handling %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"code": exc.code, "message": "Internal error"},
    )


@app.exception_handler(SubwayServiceError)
async def service_error_handler(request: Request, exc: SubwayServiceError) -> JSONResponse:
    """Every rejected request is a bad request, including unknown lines and stations."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": exc.code, "message": str(exc)},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "code": ValidationError.code,
            "message": "Invalid request",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


# Stations
@app.post("/stations", status_code=status.HTTP_201_CREATED)
def create_station(body: StationRequest, response: Response, session: Session = Depends(get_session)):
    station = StationService(session).create_station(body.name)
    response.headers["Location"] = f"/stations/{station.id}"
    return serialize_station(station)


@app.get("/stations")
def list_stations(session: Session = Depends(get_session)):
    return [serialize_station(s) for s in StationService(session).list_stations()]


@app.delete("/stations/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_station(station_id: int, session: Session = Depends(get_session)):
    StationService(session).delete_station(station_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Lines
@app.post("/lines", status_code=status.HTTP_201_CREATED)
def create_line(body: LineRequest, response: Response, session: Session = Depends(get_session)):
    route = LineService(session).create_line(
        name=body.name,
        color=body.color,
        up_station_id=body.up_station_id,
        down_station_id=body.down_station_id,
        distance=body.distance,
    )
    response.headers["Location"] = f"/lines/{route.line.id}"
    return serialize_line_route(route)


@app.get("/lines")
def list_lines(session: Session = Depends(get_session)):
    return [serialize_line(line) for line in LineService(session).list_lines()]


@app.get("/lines/{line_id}")
def get_line(line_id: int, session: Session = Depends(get_session)):
    return serialize_line_route(LineService(session).get_line(line_id))


@app.put("/lines/{line_id}")
def update_line(line_id: int, body: LineUpdateRequest, session: Session = Depends(get_session)):
    return serialize_line(LineService(session).update_line(line_id, body.name, body.color))


@app.delete("/lines/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_line(line_id: int, session: Session = Depends(get_session)):
    LineService(session).delete_line(line_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Sections
@app.post("/lines/{line_id}/sections")
def add_section(line_id: int, body: SectionRequest, session: Session = Depends(get_session)):
    stations = LineSectionService(session).add_section_to_line(
        line_id, body.up_station_id, body.down_station_id, body.distance
    )
    return [serialize_station(s) for s in stations]


@app.delete("/lines/{line_id}/sections", status_code=status.HTTP_204_NO_CONTENT)
def remove_station(
    line_id: int,
    station_id: int = Query(alias="stationId"),
    session: Session = Depends(get_session),
):
    LineSectionService(session).remove_station_from_line(line_id, station_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "subway"}


def main() -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging()
    get_db().create_tables()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
