from fastapi import APIRouter

from crud_example.api.v1.endpoints import countries, persons

api_router = APIRouter()
api_router.include_router(countries.router, prefix="/countries", tags=["countries"])
api_router.include_router(persons.router, prefix="/persons", tags=["persons"])
