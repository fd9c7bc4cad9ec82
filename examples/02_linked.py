"""
Example 02: Linked Associations

Friends and employers are separate documents reached by following links.
Saving a person also saves the linked documents it has loaded.
"""

from doc_assoc import Document, MemoryStore, attribute, many, one


class Person(Document):
    name = attribute()
    friends = many(class_name="Person")
    employer = one(class_name="Company")


class Company(Document):
    name = attribute()


def main():
    store = MemoryStore()
    Document.use_store(store)

    adam = Person(name="Adam")
    sean = Person(name="Sean")
    adam.friends << sean
    sean.friends << adam  # cyclic links are fine
    adam.employer = Company(name="Basho")

    # One save persists adam, sean, and the company
    adam.save()
    print(f"Stored documents: {len(store)}")

    loaded = Person.find(adam.key)
    print(f"\n{loaded.name}'s links:")
    for link in loaded.links:
        print(f"  {link.tag} -> {link.bucket}/{link.key}")

    print(f"\nFriends: {[friend.name for friend in loaded.friends]}")
    print(f"Employer: {loaded.employer.name}")


if __name__ == "__main__":
    main()
