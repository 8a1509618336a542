from app.models.passenger import Passenger
from app.repositories.base import CrudRepository


class PassengerRepository(CrudRepository[Passenger]):
    model_class = Passenger
