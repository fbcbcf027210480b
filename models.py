from dataclasses import dataclass


@dataclass
class WeatherResult:
    city: str
    country: str | None
    temp: float
    temp_min: float
    temp_max: float
    description: str

    # Builds a result from the current-weather JSON body; KeyError/IndexError/TypeError on a malformed payload.
    @classmethod
    def from_payload(cls, data):
        main = data["main"]
        sys_ = data.get("sys") or {}
        if not isinstance(sys_, dict):
            raise TypeError(f"sys must be an object, got {type(sys_).__name__}")
        return cls(
            city=data["name"],
            country=sys_.get("country"),
            temp=float(main["temp"]),
            temp_min=float(main["temp_min"]),
            temp_max=float(main["temp_max"]),
            description=data["weather"][0]["description"],
        )

    def __repr__(self):
        return f"<WeatherResult {self.city}, {self.country} {self.temp}°C {self.description!r}>"


class SearchState:
    """
    State of one query cycle: the city, the weather result, the advice and
    the error to surface. Advice can only be set once a weather result exists.
    """

    def __init__(self):
        self.city = ""
        self.weather: WeatherResult | None = None
        self.advice = ""
        self.error: str | None = None

    def begin(self, city: str):
        self.city = city
        self.weather = None
        self.advice = ""
        self.error = None

    def set_weather(self, result: WeatherResult):
        self.weather = result

    def set_advice(self, text: str):
        if self.weather is None:
            raise ValueError("advice requires a weather result in the same query cycle")
        self.advice = text

    def fail(self, message: str):
        self.weather = None
        self.advice = ""
        self.error = message

    # Input errors leave whatever is on screen untouched.
    def reject(self, message: str):
        self.error = message

    @property
    def ok(self):
        return self.error is None and self.weather is not None
