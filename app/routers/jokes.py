from fastapi import APIRouter, Depends, Query, status

from app import schemas
from app.core.errors import InternalFailure, InvalidParameter, JokeAPIError, NotFound
from app.models import JokeType
from app.services.dispatcher import dispatch_joke
from app.services.providers import JokeProviders, get_providers
from app.services.store import JokeStore, get_joke_store

router = APIRouter(prefix="/joke", tags=["Jokes"])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponse, "description": "Parámetro no válido"},
    status.HTTP_404_NOT_FOUND: {"model": schemas.MessageResponse, "description": "Chiste no encontrado"},
}


@router.get(
    "",
    response_model=schemas.ExternalJoke | schemas.JokeRead,
    summary="Obtiene un chiste",
    responses={
        **ERROR_RESPONSES,
        status.HTTP_502_BAD_GATEWAY: {"model": schemas.MessageResponse, "description": "Proveedor no disponible"},
    },
)
def get_joke(
    joke_type: JokeType = Query(alias="type", description="Tipo de chiste a obtener."),
    providers: JokeProviders = Depends(get_providers),
    store: JokeStore = Depends(get_joke_store),
):
    joke = dispatch_joke(joke_type, providers, store)
    if isinstance(joke, schemas.ExternalJoke):
        return joke
    return schemas.JokeRead.model_validate(joke)


@router.post(
    "",
    response_model=schemas.JokeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Crea un nuevo chiste",
    responses={status.HTTP_400_BAD_REQUEST: ERROR_RESPONSES[status.HTTP_400_BAD_REQUEST]},
)
def create_joke(payload: schemas.JokeCreate, store: JokeStore = Depends(get_joke_store)):
    return store.create(payload)


@router.get(
    "/count",
    response_model=schemas.CategoryCount,
    summary="Obtiene el conteo de chistes por categoría",
    responses={status.HTTP_400_BAD_REQUEST: {"model": schemas.MessageResponse}},
)
def get_joke_count_by_category(store: JokeStore = Depends(get_joke_store)):
    try:
        return store.count_by_category()
    except InternalFailure as exc:
        raise InvalidParameter("Error al obtener el conteo de chistes") from exc


@router.get(
    "/rating",
    response_model=list[schemas.JokeRead],
    summary="Obtiene todos los chistes por puntaje",
    responses={
        **ERROR_RESPONSES,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": schemas.MessageResponse},
    },
)
def get_jokes_by_rating(
    rating: float = Query(description="Puntaje de los chistes a obtener.", allow_inf_nan=False),
    store: JokeStore = Depends(get_joke_store),
):
    try:
        jokes = store.filter_by_rating(rating)
    except JokeAPIError as exc:
        raise InternalFailure("Error al obtener los chistes") from exc
    if not jokes:
        raise NotFound("No hay chistes con este puntaje")
    return jokes


@router.get("/{joke_id}", response_model=schemas.JokeRead, summary="Obtiene un chiste por su ID", responses=ERROR_RESPONSES)
def get_joke_by_id(joke_id: int, store: JokeStore = Depends(get_joke_store)):
    joke = store.get(joke_id)
    if joke is None:
        raise NotFound()
    return joke


@router.put(
    "/{joke_id}",
    response_model=schemas.JokeRead,
    summary="Actualiza un chiste por su ID",
    responses=ERROR_RESPONSES,
)
def update_joke(joke_id: int, payload: schemas.JokeUpdate, store: JokeStore = Depends(get_joke_store)):
    # explicit nulls are ignored; text, rating and category are never cleared
    joke = store.update(joke_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if joke is None:
        raise NotFound()
    return joke


@router.delete(
    "/{joke_id}",
    response_model=schemas.MessageResponse,
    summary="Elimina un chiste por su ID",
    responses=ERROR_RESPONSES,
)
def delete_joke(joke_id: int, store: JokeStore = Depends(get_joke_store)):
    if not store.delete(joke_id):
        raise NotFound()
    return schemas.MessageResponse(message="Chiste eliminado exitosamente")
