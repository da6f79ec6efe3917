from app.repositories.base import IFavoriteRepository, IStationListRepository
from app.repositories.favorite_repository import SqlAlchemyFavoriteRepository
from app.repositories.station_list_repository import SqlAlchemyStationListRepository

__all__ = [
    "IFavoriteRepository",
    "IStationListRepository",
    "SqlAlchemyFavoriteRepository",
    "SqlAlchemyStationListRepository",
]
