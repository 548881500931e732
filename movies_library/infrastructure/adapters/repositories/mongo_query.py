import re
from typing import Any, Dict

from bson import ObjectId
from bson.errors import InvalidId

from movies_library.domain.exceptions import ArgumentError
from movies_library.domain.models.movie import Movie
from movies_library.domain.models.movie_filter import MatchMode, MovieFilter

DOCUMENT_FIELDS = ("title", "director", "year_released", "genre", "duration", "rating")


def to_mongo_query(movie_filter: MovieFilter) -> Dict[str, Any]:
    if movie_filter.field == "id":
        try:
            return {"_id": ObjectId(movie_filter.value)}
        except InvalidId as e:
            raise ArgumentError(f"'{movie_filter.value}' is not a valid movie id") from e

    if movie_filter.mode is MatchMode.CONTAINS:
        return {movie_filter.field: {"$regex": re.escape(movie_filter.value)}}
    return {movie_filter.field: movie_filter.value}


def to_document(movie: Movie) -> Dict[str, Any]:
    return movie.model_dump(include=set(DOCUMENT_FIELDS))


def to_domain(document: Dict[str, Any]) -> Movie:
    fields = {field: document[field] for field in DOCUMENT_FIELDS if field in document}
    return Movie(id=str(document["_id"]), **fields)
