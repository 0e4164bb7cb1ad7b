from pydantic import BaseModel, Field

from core.constants import Ability


class Skill(BaseModel):
    """A skill and the ability score its checks are made with."""

    index: str = Field(description="Unique identifier of the skill.")
    name: str = Field(description="The display name of the skill.")
    description: str = Field(default="", description="A brief description of the skill.")
    ability: Ability = Field(description="The ability the skill is checked with.")
