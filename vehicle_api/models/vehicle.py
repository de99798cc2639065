from sqlalchemy import Column, Date, Integer, String

from vehicle_api.database import Base


class Vehicle(Base):
    __tablename__ = "vehicle"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String, nullable=False)
    model_code = Column(String, nullable=False)
    brand_name = Column(String, nullable=False)
    launch_date = Column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<Vehicle id={self.id} brand_name={self.brand_name!r} model_code={self.model_code!r}>"
