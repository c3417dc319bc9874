from __future__ import annotations

from typing import Callable, Sequence

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from tripdesk.api.security import get_catalog, require_customer
from tripdesk.data.seed import Catalog
from tripdesk.logging import get_logger
from tripdesk.models import Driver, Trip, Vehicle

logger = get_logger(__name__)


def generate_listing_router(
    model: type[BaseModel],
    records: Callable[[Catalog], Sequence[BaseModel]],
    *,
    path: str,
    tag: str,
    name: str,
) -> APIRouter:
    """
    Create a router exposing one session-scoped, read-only listing.

    The generated ``GET <path>`` endpoint requires a valid ``SessionId``
    header (see :func:`tripdesk.api.security.require_customer`) and returns
    the records of the caller's customer in catalog order.

    Parameters
    ----------
    model : pydantic model class
        Record type; used as the response item model.
    records : callable
        Picks the record tuple to filter out of the app's :class:`Catalog`.
    path : str
        Route path, e.g. ``"/trips"``.
    tag : str
        Tag name for OpenAPI grouping.
    name : str
        Route name, e.g. ``"GetTrips"``.

    Returns
    -------
    APIRouter
    """

    router = APIRouter(tags=[tag])

    @router.get(path, response_model=list[model], name=name)
    def list_records(
        customer_name: str = Depends(require_customer),
        catalog: Catalog = Depends(get_catalog),
    ):
        rows = [row for row in records(catalog) if row.customerName == customer_name]
        logger.debug("%s: %d row(s) for %s", name, len(rows), customer_name)
        return rows

    return router


trips_router = generate_listing_router(
    Trip, lambda catalog: catalog.trips, path="/trips", tag="Trips", name="GetTrips"
)
vehicles_router = generate_listing_router(
    Vehicle, lambda catalog: catalog.vehicles, path="/vehicles", tag="Vehicles", name="GetVehicles"
)
drivers_router = generate_listing_router(
    Driver, lambda catalog: catalog.drivers, path="/drivers", tag="Drivers", name="GetDrivers"
)

routers = (trips_router, vehicles_router, drivers_router)
