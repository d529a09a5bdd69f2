from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Config(BaseModel):
    # camelCase on the wire, snake_case in code. Snapshots are never mutated.
    model_config = ConfigDict(
        alias_generator = to_camel,
        populate_by_name = True,
        frozen = True,
    )

    def dump(self):
        return self.model_dump(by_alias = True, mode = "json")
