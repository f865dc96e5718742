"""
PokeAPI record models.

Decodes raw response bodies into typed records. Callers pass bytes and do
not care whether they came from the cache or the network.
"""

from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DecodeError

R = TypeVar("R", bound="Record")


class Record(BaseModel):
    """Base for all decoded records. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_bytes(cls: Type[R], payload: bytes) -> R:
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            first = e.errors()[0]
            raise DecodeError(f"could not decode {cls.__name__}: {first['msg']}") from e


class NamedResource(Record):
    name: str
    url: str = ""


# ========== Location areas ==========

class LocationAreaPage(Record):
    """One page of the paginated location-area listing."""
    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[NamedResource] = Field(default_factory=list)


class EncounterDetail(Record):
    min_level: int = 0
    max_level: int = 0


class VersionEncounterDetail(Record):
    version: NamedResource
    encounter_details: List[EncounterDetail] = Field(default_factory=list)


class PokemonEncounter(Record):
    pokemon: NamedResource
    version_details: List[VersionEncounterDetail] = Field(default_factory=list)


class LocationArea(Record):
    name: str = ""
    pokemon_encounters: List[PokemonEncounter] = Field(default_factory=list)


# ========== Pokemon ==========

class Stat(Record):
    stat: NamedResource
    base_stat: int = 0


class TypeSlot(Record):
    slot: int = 0
    type: NamedResource


class PokemonDetail(Record):
    name: str
    base_experience: Optional[int] = None
    height: int = 0
    weight: int = 0
    stats: List[Stat] = Field(default_factory=list)
    types: List[TypeSlot] = Field(default_factory=list)
