"""Resource models as served by the upstream API."""

from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    # Upstream objects carry more fields than the views need
    model_config = ConfigDict(extra="allow")


class Post(Resource):
    id: int
    userId: int
    title: str
    body: str


class CreatePostData(BaseModel):
    title: str
    body: str
    userId: int


class Todo(Resource):
    id: int
    todo: str
    completed: bool
    userId: int


class CreateTodoData(BaseModel):
    todo: str
    completed: bool = False
    userId: int = 1


class Hair(BaseModel):
    color: str
    type: str


class Coordinates(BaseModel):
    lat: float
    lng: float


class Address(BaseModel):
    address: str
    city: str
    coordinates: Coordinates | None = None
    postalCode: str
    state: str


class Bank(BaseModel):
    cardExpire: str
    cardNumber: str
    cardType: str
    currency: str
    iban: str


class Company(BaseModel):
    address: Address | None = None
    department: str
    name: str
    title: str


class User(Resource):
    id: int
    firstName: str
    lastName: str
    maidenName: str | None = None
    age: int | None = None
    gender: str | None = None
    email: str
    phone: str = ""
    username: str
    password: str | None = None
    birthDate: str | None = None
    image: str | None = None
    bloodGroup: str | None = None
    height: float | None = None
    weight: float | None = None
    eyeColor: str | None = None
    hair: Hair | None = None
    domain: str | None = None
    ip: str | None = None
    address: Address | None = None
    macAddress: str | None = None
    university: str | None = None
    bank: Bank | None = None
    company: Company | None = None
    ein: str | None = None
    ssn: str | None = None
    userAgent: str | None = None


class CreateUserData(BaseModel):
    firstName: str
    lastName: str
    username: str
    email: str
    phone: str | None = None
    age: int | None = None
