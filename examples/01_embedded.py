"""
Example 01: Embedded Associations

Addresses and accounts are stored inside the person's own document.
"""

from doc_assoc import (
    Document,
    EmbeddedDocument,
    MemoryStore,
    attribute,
    embedded_in,
    many,
    one,
)


class Person(Document):
    """A person with embedded addresses and account"""
    name = attribute()
    addresses = many()
    account = one()


class Address(EmbeddedDocument):
    street = attribute()
    city = attribute()
    person = embedded_in()


class Account(EmbeddedDocument):
    paid_until = attribute()


def main():
    store = MemoryStore()
    Document.use_store(store)

    person = Person(name="Adam")
    person.addresses << Address(street="100 Main Street", city="Springfield")
    person.addresses << {"street": "42 Side Road", "city": "Shelbyville"}
    person.account = {"paid_until": "2027-01-01"}
    person.save()

    print("Stored attributes:")
    print(f"  {store.fetch('people', person.key).data}")

    loaded = Person.find(person.key)
    print(f"\nLoaded {loaded.name}:")
    for address in loaded.addresses:
        print(f"  {address.street}, {address.city} (belongs to {address.person.name})")
    print(f"  account paid until {loaded.account.paid_until}")
    print(f"  has account? {loaded.has_account}")


if __name__ == "__main__":
    main()
