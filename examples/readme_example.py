from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from yextapi import (
    Client,
    ClientSettings,
    CustomFieldService,
    EntityListOptions,
    EntityService,
    LocationEntity,
)


class HealthcareProfessional(BaseModel):
    """Account-specific entity type, registered alongside the built-ins."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    meta: dict = {}
    name: str | None = None
    npi: str | None = None

    def get_entity_type(self) -> str:
        return "healthcareProfessional"

    def get_entity_id(self) -> str:
        return self.meta.get("id", "")


def main() -> None:
    # Reads YEXT_API_KEY / YEXT_ACCOUNT_ID from the environment or .env
    with Client(ClientSettings()) as client:
        entities = EntityService(client)
        entities.register_entity("healthcareProfessional", HealthcareProfessional)

        for entity in entities.list_all(EntityListOptions(resolve_placeholders=True)):
            if isinstance(entity, LocationEntity):
                print(f"Location {entity.get_entity_id()}: {entity.get_name()!r}")
            elif isinstance(entity, HealthcareProfessional):
                print(f"Professional {entity.get_entity_id()}: NPI {entity.npi}")
            else:
                print(f"{entity.get_entity_type()} {entity.get_entity_id()}")

        custom_fields = CustomFieldService(client)
        for cf in custom_fields.list_all():
            print(f"Custom field {cf.id} ({cf.type}): {cf.name}")


if __name__ == "__main__":
    main()
