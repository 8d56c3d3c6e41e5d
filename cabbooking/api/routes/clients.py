"""
Client endpoints
================

GET    /api/v1/clients             -- list clients
POST   /api/v1/clients             -- register a client
GET    /api/v1/clients/{client_id} -- fetch one client
PUT    /api/v1/clients/{client_id} -- replace a client's details
DELETE /api/v1/clients/{client_id} -- remove a client
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from cabbooking.api.dependencies import get_container, resolve_client
from cabbooking.api.middleware import RATE_LIMIT, limiter
from cabbooking.api.schemas import ERROR_RESPONSES, ClientCreateRequest, ClientResponse
from cabbooking.domain.entities import Client
from cabbooking.services.container import ServiceContainer

router = APIRouter(prefix="/clients", tags=["clients"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[ClientResponse], summary="List clients")
@limiter.limit(RATE_LIMIT)
async def list_clients(
    request: Request,
    container: ServiceContainer = Depends(get_container),
):
    return [ClientResponse.from_domain(c) for c in container.clients.find_all()]


@router.post("", status_code=201, response_model=ClientResponse, summary="Register a client")
@limiter.limit(RATE_LIMIT)
async def create_client(
    request: Request,
    body: ClientCreateRequest,
    container: ServiceContainer = Depends(get_container),
):
    client = container.clients.add(**body.model_dump())
    return ClientResponse.from_domain(client)


@router.get("/{client_id}", response_model=ClientResponse, summary="Get a client")
@limiter.limit(RATE_LIMIT)
async def get_client(
    request: Request,
    client_id: int,
    container: ServiceContainer = Depends(get_container),
):
    return ClientResponse.from_domain(resolve_client(container, client_id))


@router.put("/{client_id}", response_model=ClientResponse, summary="Update a client")
@limiter.limit(RATE_LIMIT)
async def update_client(
    request: Request,
    client_id: int,
    body: ClientCreateRequest,
    container: ServiceContainer = Depends(get_container),
):
    client = container.clients.update(Client(id=client_id, **body.model_dump()))
    return ClientResponse.from_domain(client)


@router.delete("/{client_id}", status_code=204, summary="Delete a client")
@limiter.limit(RATE_LIMIT)
async def delete_client(
    request: Request,
    client_id: int,
    container: ServiceContainer = Depends(get_container),
):
    container.clients.delete(client_id)
    return Response(status_code=204)
