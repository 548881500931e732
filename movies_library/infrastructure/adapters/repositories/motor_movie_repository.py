from typing import List, Optional, Sequence

from motor.motor_asyncio import AsyncIOMotorCollection

from movies_library.domain.exceptions import ArgumentError, NoMatchError, NotFoundError
from movies_library.domain.models.movie import Movie
from movies_library.domain.models.movie_filter import MovieFilter
from movies_library.domain.ports.repositories.movie_repository import MovieRepository
from movies_library.infrastructure.adapters.repositories.mongo_query import to_document, to_domain, to_mongo_query


class MotorMovieRepository(MovieRepository):
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def add(self, movie: Movie) -> Movie:
        result = await self.collection.insert_one(to_document(movie))
        movie.id = str(result.inserted_id)
        return movie

    async def add_many(self, movies: Sequence[Movie]) -> List[Movie]:
        if not movies:
            return []
        result = await self.collection.insert_many([to_document(movie) for movie in movies])
        for movie, inserted_id in zip(movies, result.inserted_ids):
            movie.id = str(inserted_id)
        return list(movies)

    async def delete(self, title: Optional[str]) -> None:
        if title is None or not title.strip():
            raise ArgumentError("Title cannot be null or empty.")

        result = await self.collection.delete_one(to_mongo_query(MovieFilter.by_title(title)))
        if result.deleted_count == 0:
            raise NotFoundError(f"Movie with title '{title}' not found")

    async def update(self, movie: Movie) -> Movie:
        movie_filter = MovieFilter.by_id(movie.id) if movie.id else MovieFilter.by_title(movie.title)
        result = await self.collection.replace_one(to_mongo_query(movie_filter), to_document(movie))
        if result.matched_count == 0:
            raise NotFoundError(f"Movie '{movie_filter.value}' not found")
        return movie

    async def get_all(self) -> List[Movie]:
        cursor = self.collection.find({}).sort("_id", 1)
        documents = await cursor.to_list(length=None)
        return [to_domain(document) for document in documents]

    async def get_by_title(self, title: Optional[str]) -> Optional[Movie]:
        if title is None:
            return None
        document = await self.collection.find_one(to_mongo_query(MovieFilter.by_title(title)))
        return to_domain(document) if document else None

    async def search_by_title_fragment(self, fragment: Optional[str]) -> List[Movie]:
        if fragment is None:
            raise ArgumentError("Title fragment cannot be null.")
        cursor = self.collection.find(to_mongo_query(MovieFilter.title_contains(fragment)))
        documents = await cursor.to_list(length=None)
        if not documents:
            raise NoMatchError(f"No movie title contains '{fragment}'")
        return [to_domain(document) for document in documents]

    async def delete_all(self) -> int:
        result = await self.collection.delete_many({})
        return result.deleted_count
