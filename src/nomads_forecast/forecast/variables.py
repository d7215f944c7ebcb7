from enum import Enum


class Variable:
    def __init__(
        self, name: str, unit: str, description: str, display_name: str | None = None
    ):
        self.name = name
        self.unit = unit
        self.description = description
        self.display_name = display_name or name

    @property
    def label(self) -> str:
        return f"{self.display_name} ({self.unit})"

    def __eq__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return (
            self.name == other.name
            and self.unit == other.unit
            and self.description == other.description
        )

    def __str__(self):
        return self.name

    def __repr__(self):
        return (
            f"Variable(name={self.name}, unit={self.unit}, "
            f"description={self.description})"
        )

    def __hash__(self):
        return hash((self.name, self.unit, self.description))


class Variables(Enum):
    ACCUMULATED_PRECIPITATION = Variable(
        "acpcpsfc",
        "mm",
        "surface convective precipitation [kg/m^2]",
        "Accumulated precipitation",
    )
    TOTAL_PRECIPITATION = Variable(
        "apcpsfc", "mm", "surface total precipitation [kg/m^2]", "Total precipitation"
    )
    PRECIPITATION_RATE = Variable(
        "pratesfc",
        "kg m⁻² s⁻¹",
        "surface precipitation rate [kg/m^2/s]",
        "Precipitation rate",
    )
    AIR_TEMPERATURE_2M = Variable(
        "tmp2m", "K", "2 m above ground temperature [k]", "2 m temperature"
    )
    RELATIVE_HUMIDITY_2M = Variable(
        "rh2m", "%", "2 m above ground relative humidity [%]", "2 m relative humidity"
    )
    SURFACE_PRESSURE = Variable(
        "pressfc", "Pa", "surface pressure [pa]", "Surface pressure"
    )

    def __str__(self) -> str:
        return self.value.name

    def __repr__(self) -> str:
        return self.value.__repr__()

    def __hash__(self) -> int:
        return hash(self.value.name)

    def __eq__(self, other) -> bool:
        if isinstance(other, str):
            return self.value.name == other
        if isinstance(other, Variables):
            return self.value.name == other.value.name
        return NotImplemented


def variable_name(variable: Variables | Variable | str) -> str:
    if isinstance(variable, Variables):
        return variable.value.name
    return str(variable)


def find_variable(name: str) -> Variable | None:
    for v in Variables:
        if v.value.name == name:
            return v.value
    return None
