import pytest
from graphql import parse, validate

from gql_builder import (
    DEFAULT_OPERATION_NAME,
    Document,
    EnumValue,
    MutationOperation,
    QueryOperation,
)
from gql_builder.exceptions import (
    DuplicateFragmentName,
    DuplicateOperationName,
    InvalidDocument,
    InvalidFragmentTarget,
)

from .schema import ShopSchema


@pytest.fixture
def document():
    return Document(ShopSchema)


def assert_valid_query(query_string):
    errors = validate(ShopSchema, parse(query_string))
    assert errors == []


def test_document_needs_a_schema():
    with pytest.raises(TypeError) as exc_info:
        Document("type Query { a: Int }")

    assert "Document needs a schema as parameter" in str(exc_info.value)


def test_initialize_calls_builder_with_self():
    received = []

    document = Document(ShopSchema, received.append)

    assert received == [document]


def test_schema_is_read_only(document):
    assert document.schema is ShopSchema

    with pytest.raises(AttributeError):
        document.schema = ShopSchema


def test_add_mutation_creates_a_mutation_operation(document):
    mutation = document.add_mutation("createUser")

    assert isinstance(mutation, MutationOperation)
    assert document.operations == {"createUser": mutation}


def test_add_query_creates_a_query_operation(document):
    query = document.add_query("getUser")

    assert isinstance(query, QueryOperation)
    assert document.operations == {"getUser": query}


def test_add_operation_sets_default_name(document):
    query = document.add_query()

    assert query.name == DEFAULT_OPERATION_NAME == "default"
    assert document.operations == {"default": query}


def test_add_operation_calls_builder(document):
    received = []

    query = document.add_query(builder=received.append)

    assert received == [query]


def test_add_operation_supports_multiple_unique_operations(document):
    document.add_query("getUser")
    document.add_mutation("createUser")
    document.add_query("getPosts")

    assert list(document.operations) == ["getUser", "createUser", "getPosts"]


def test_add_operation_enforces_unique_names(document):
    query = document.add_query("getUser")

    with pytest.raises(DuplicateOperationName):
        document.add_mutation("getUser")

    assert document.operations == {"getUser": query}


def test_add_operation_enforces_unique_default_name(document):
    document.add_query()

    with pytest.raises(DuplicateOperationName):
        document.add_query()


def test_named_operation_after_default_operation_is_invalid(document):
    query = document.add_query()

    with pytest.raises(InvalidDocument):
        document.add_query("getUser")

    assert document.operations == {"default": query}


def test_default_operation_after_named_operation_is_invalid(document):
    query = document.add_query("getUser")

    with pytest.raises(InvalidDocument):
        document.add_mutation()

    assert document.operations == {"getUser": query}


def test_operation_name_cannot_be_changed(document):
    query = document.add_query("getUser")

    with pytest.raises(AttributeError):
        query.name = "other"


def test_define_fragment_creates_a_fragment(document):
    fragment = document.define_fragment("imageFields", on="Image")

    assert fragment.name == "imageFields"
    assert fragment.type is ShopSchema.get_type("Image")
    assert fragment.document is document
    assert document.fragments == {"imageFields": fragment}


def test_define_fragment_calls_builder(document):
    received = []

    fragment = document.define_fragment(
        "imageFields", on="Image", builder=received.append
    )

    assert received == [fragment]


@pytest.mark.parametrize("type_name", ["Node", "SearchResult", "Shop"])
def test_define_fragment_on_composite_types(document, type_name):
    fragment = document.define_fragment("fields", on=type_name)

    assert fragment.type.name == type_name


@pytest.mark.parametrize(
    "type_name", ["String", "ImageSortKeys", "CustomerCreateInput", "Unknown"]
)
def test_define_fragment_raises_exception_for_invalid_targets(document, type_name):
    with pytest.raises(InvalidFragmentTarget):
        document.define_fragment("imageFields", on=type_name)

    assert document.fragments == {}


def test_define_fragment_enforces_unique_names(document):
    fragment = document.define_fragment("imageFields", on="Image")

    with pytest.raises(DuplicateFragmentName):
        document.define_fragment("imageFields", on="Shop")

    assert document.fragments == {"imageFields": fragment}


def test_fragment_definitions_is_empty_without_fragments(document):
    assert document.fragment_definitions == ""


def test_fragment_definitions_is_the_fragments_definition_string(document):
    document.define_fragment(
        "imageFields", on="Image", builder=lambda f: f.add_field("src")
    )
    document.define_fragment(
        "shopName", on="Shop", builder=lambda f: f.add_field("name")
    )

    assert (
        document.fragment_definitions
        == """fragment imageFields on Image {
  src
}

fragment shopName on Shop {
  name
}
"""
    )


def test_empty_document_renders_nothing(document):
    assert document.to_query() == ""


def test_to_query_joins_all_operations():
    def build_customer(customer):
        customer.add_field("email")

    def build_create(create):
        create.add_field("customer", builder=build_customer)

    def build_document(d):
        d.add_query(
            "shopQuery",
            lambda q: q.add_field("shop", builder=lambda shop: shop.add_field("name")),
        )
        d.add_mutation(
            "customers",
            lambda c: c.add_field(
                "customerCreate",
                {"input": {"email": "email", "password": "password"}},
                build_create,
            ),
        )

    document = Document(ShopSchema, build_document)

    query_string = """query shopQuery {
  shop {
    name
  }
}

mutation customers {
  customerCreate(input: { email: "email", password: "password" }) {
    customer {
      email
    }
  }
}
"""

    assert document.to_query() == query_string
    assert str(document) == query_string
    assert_valid_query(query_string)


def test_to_query_includes_fragment_definitions(document):
    document.define_fragment(
        "imageFields", on="Image", builder=lambda f: f.add_field("src")
    )

    get_shop = document.add_query("getShop")
    get_shop.add_field("shop").add_field("name")

    get_images = document.add_query("getProductImages")
    shop = get_images.add_field("shop")
    product = shop.add_field("productByHandle", {"handle": "test"})

    def build_node(node):
        node.add_fragment("imageFields")
        node.add_inline_fragment(builder=lambda f: f.add_field("altText"))

    product.add_connection("images", {"first": 10}, build_node)

    query_string = """fragment imageFields on Image {
  src
}

query getShop {
  shop {
    name
  }
}

query getProductImages {
  shop {
    productByHandle(handle: "test") {
      id
      images(first: 10) {
        edges {
          cursor
          node {
            ...imageFields
            ... on Image {
              altText
            }
          }
        }
        pageInfo {
          hasPreviousPage
          hasNextPage
        }
      }
    }
  }
}
"""

    assert document.to_query() == query_string
    assert_valid_query(query_string)


def test_fragment_spread_may_reference_a_fragment_defined_later(document):
    query = document.add_query("getShop")
    query.add_field("shop").add_fragment("shopName")

    document.define_fragment(
        "shopName", on="Shop", builder=lambda f: f.add_field("name")
    )

    query_string = """fragment shopName on Shop {
  name
}

query getShop {
  shop {
    ...shopName
  }
}
"""

    assert document.to_query() == query_string
    assert_valid_query(query_string)


def test_default_operation_is_rendered_with_its_name(document):
    document.add_query().add_field("shop").add_field("name")

    assert (
        document.to_query()
        == """query default {
  shop {
    name
  }
}
"""
    )


def test_rendering_does_not_change_the_document(document):
    document.define_fragment(
        "shopName", on="Shop", builder=lambda f: f.add_field("name")
    )
    document.add_query("getShop").add_field("shop").add_fragment("shopName")

    first = document.to_query()

    assert document.to_query() == first
    assert list(document.operations) == ["getShop"]
    assert list(document.fragments) == ["shopName"]


def test_document_repr(document):
    document.add_query("getShop")
    document.define_fragment("shopName", on="Shop")

    assert repr(document) == "<Document operations=['getShop'] fragments=['shopName']>"


def test_to_query_with_enum_and_boolean_arguments(document):
    node = document.add_query("getImages").add_field("node", {"id": "1"})

    def build_product(product):
        product.add_connection(
            "images",
            {"first": 5, "sortKey": EnumValue("CREATED_AT"), "reverse": True},
            lambda image: image.add_field("src"),
        )

    node.add_inline_fragment("Product", build_product)

    query_string = document.to_query()

    assert "images(first: 5, sortKey: CREATED_AT, reverse: true) {" in query_string
    assert_valid_query(query_string)


def test_generator_arguments_are_rendered_on_every_call(document):
    document.add_query("search").add_field(
        "search", {"query": "x", "first": 1, "ids": (i for i in [1, 2])}
    )

    first = document.to_query()

    assert document.to_query() == first
    assert 'search(query: "x", first: 1, ids: [1, 2])' in first
