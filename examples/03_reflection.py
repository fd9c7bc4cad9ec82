"""
Example 03: Association Metadata

Inspecting how declared associations resolve, including inherited ones.
"""

from doc_assoc import Document, EmbeddedDocument, attribute, many, one


class Tag(EmbeddedDocument):
    label = attribute()


class Author(Document):
    name = attribute()


class Post(Document):
    title = attribute()
    tags = many()
    author = one()


class Article(Post):
    reviewers = many(class_name="Author", using="linked")


def main():
    for cls in (Post, Article):
        print(f"{cls.__name__}:")
        for name, association in cls.associations.items():
            print(
                f"  {name:<10} {association.cardinality.value:<5} "
                f"-> {association.target_type_name:<7} "
                f"{association.storage_strategy.value:<9} "
                f"{association.proxy_class.__name__}"
            )
        print(f"  embedded: {[a.name for a in cls.embedded_associations()]}")


if __name__ == "__main__":
    main()
