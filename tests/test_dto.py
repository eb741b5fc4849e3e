"""
Tests for the DTO base contract and the coercion policy of its fields.
"""

import json

import pytest

import authlete.dto as dto_package
from authlete.dto import (
    Address, AuthorizationResponse, BooleanField, Client,
    ClientAuthorizationGetListRequest, ClientListResponse, Dto, DtoField,
    DtoListField, EnumField, EnumListField, IntegerField, IntrospectionResponse,
    NullableBooleanField, Pair, Property, Scope, Service, StringListField,
    StringOrIntegerField, TaggedValue, TokenResponse, to_camel_case, to_json
)
from authlete.types import (
    ClientType, GrantType, IntrospectionAction, JsonParseError, ResponseType,
    TypeMismatchError, ValidationError
)


class TestFieldTable:
    """Test field declaration and wire keys"""

    def test_to_camel_case(self):
        """Test wire key generation"""
        assert to_camel_case("client_id") == "clientId"
        assert to_camel_case("id_token_sign_alg") == "idTokenSignAlg"
        assert to_camel_case("tos_uri") == "tosUri"
        assert to_camel_case("scope") == "scope"

    def test_field_order(self):
        """Test that fields keep declaration order with inherited ones first"""
        names = IntrospectionResponse.field_names()
        assert names[:3] == ["result_code", "result_message", "action"]

    def test_explicit_wire_keys(self):
        """Test fields whose wire key is not the camelCase name"""
        assert list(Address().to_dict()) == [
            "formatted", "street_address", "locality", "region", "postal_code", "country",
        ]
        assert "defaultEntry" in Scope().to_dict()
        assert "sectorIdentifier" in Client().to_dict()

    def test_unknown_keyword_rejected(self):
        """Test constructing with an unknown field name"""
        with pytest.raises(TypeError):
            Scope(unknown=1)


class TestDefaults:
    """Test field defaults"""

    def test_defaults(self):
        """Test defaults of a freshly built DTO"""
        client = Client()
        assert client.client_id is None
        assert client.client_names is None
        assert client.auth_time_required is False
        assert client.client_type is None

        response = ClientListResponse()
        assert response.start == 0
        assert response.total_count == 0

        assert IntrospectionResponse().usable is False

    def test_absent_keys_keep_defaults(self):
        """Test that from_dict leaves missing fields at their defaults"""
        client = Client.from_dict({"clientName": "demo"})
        assert client.client_name == "demo"
        assert client.auth_time_required is False
        assert client.redirect_uris is None

    def test_unknown_keys_ignored(self):
        """Test forward compatibility with keys added by the server"""
        client = Client.from_dict({"clientName": "demo", "brandNewField": [1, 2]})
        assert client.client_name == "demo"
        assert "brandNewField" not in client.to_dict()


class TestSetters:
    """Test validation on assignment"""

    def test_string_field(self):
        """Test plain string fields"""
        client = Client()
        client.client_name = "My Client"
        client.client_name = None
        with pytest.raises(ValidationError):
            client.client_name = 1
        with pytest.raises(ValidationError):
            client.client_name = True

    def test_failed_assignment_leaves_field_untouched(self):
        """Test that a rejected value does not change the field"""
        client = Client(client_name="kept")
        with pytest.raises(ValidationError):
            client.client_name = ["not", "a", "string"]
        assert client.client_name == "kept"

    def test_string_or_integer_field(self):
        """Test fields that accept integers or strings"""
        client = Client()
        client.client_id = 5899463614448063
        client.client_id = "5899463614448063"
        with pytest.raises(ValidationError):
            client.client_id = True
        with pytest.raises(ValidationError):
            client.client_id = 1.5

    def test_boolean_field(self):
        """Test strict boolean setters"""
        client = Client()
        client.auth_time_required = True
        with pytest.raises(ValidationError):
            client.auth_time_required = "true"
        with pytest.raises(ValidationError):
            client.auth_time_required = None

    def test_nullable_boolean_field(self):
        """Test tri-state booleans"""
        response = IntrospectionResponse()
        assert response.active is None
        response.active = False
        response.active = None
        with pytest.raises(ValidationError):
            response.active = "false"

    def test_enum_field(self):
        """Test enum setters accept members and canonical names"""
        client = Client()
        client.client_type = ClientType.PUBLIC
        assert client.client_type is ClientType.PUBLIC
        client.client_type = "CONFIDENTIAL"
        assert client.client_type is ClientType.CONFIDENTIAL
        with pytest.raises(ValidationError):
            client.client_type = "confidential"
        with pytest.raises(TypeMismatchError):
            client.client_type = 1

    def test_enum_list_field(self):
        """Test lists of enum members"""
        client = Client(grant_types=["AUTHORIZATION_CODE", GrantType.REFRESH_TOKEN])
        assert client.grant_types == [GrantType.AUTHORIZATION_CODE, GrantType.REFRESH_TOKEN]
        with pytest.raises(ValidationError):
            client.grant_types = "AUTHORIZATION_CODE"
        with pytest.raises(ValidationError):
            client.response_types = ["CODE", "code"]

    def test_string_list_field(self):
        """Test lists of strings"""
        client = Client(redirect_uris=["https://example.com/cb"])
        with pytest.raises(ValidationError, match=r"'redirect_uris\[1\]' must be a string."):
            client.redirect_uris = ["https://example.com/cb", 1]
        with pytest.raises(ValidationError):
            client.redirect_uris = {"uri": "https://example.com/cb"}

    def test_dto_fields(self):
        """Test nested DTO setters check the element type"""
        client = Client()
        client.client_names = [TaggedValue("en", "Client")]
        with pytest.raises(ValidationError):
            client.client_names = [Pair("en", "Client")]
        with pytest.raises(ValidationError):
            client.client_names = [{"tag": "en", "value": "Client"}]

    def test_non_negative_integer(self):
        """Test pagination offsets reject negative values"""
        request = ClientAuthorizationGetListRequest(start=0, end=5)
        with pytest.raises(ValidationError, match="'start' must not be negative."):
            request.start = -1
        assert request.start == 0
        with pytest.raises(ValidationError):
            request.end = "5"


class TestBooleanCoercion:
    """Test lenient decoding of boolean flags"""

    @pytest.mark.parametrize("wire,expected", [
        ('true', True),
        ('false', False),
        ('"true"', True),
        ('"false"', False),
        ('"TRUE"', True),
        ('"yes"', False),
        ('null', False),
    ])
    def test_flag(self, wire, expected):
        """Test accepted wire forms of a flag"""
        client = Client.from_json('{"authTimeRequired": %s}' % wire)
        assert client.auth_time_required is expected

    @pytest.mark.parametrize("wire", ['["a", "b"]', '{"a": 1}'])
    def test_flag_rejects_containers(self, wire):
        """Test that arrays and objects are rejected"""
        with pytest.raises(ValidationError):
            Client.from_json('{"authTimeRequired": %s}' % wire)

    def test_tri_state(self):
        """Test tri-state booleans keep null"""
        assert IntrospectionResponse.from_json('{"active": null}').active is None
        assert IntrospectionResponse.from_json('{"active": true}').active is True
        with pytest.raises(ValidationError):
            IntrospectionResponse.from_json('{"active": "true"}')


class TestIntegerOrString:
    """Test integer-or-string fields"""

    def test_representation_preserved(self):
        """Test that integers and numeric strings come back unchanged"""
        as_int = Client.from_json('{"clientId": 1}')
        as_str = Client.from_json('{"clientId": "1"}')
        assert as_int.client_id == 1
        assert as_str.client_id == "1"
        assert as_int.to_dict()["clientId"] == 1
        assert as_str.to_dict()["clientId"] == "1"

    def test_big_integer_kept_as_string(self):
        """Test that identifiers beyond int64 do not lose precision"""
        client = Client.from_json('{"clientId": 18446744073709551615}')
        assert client.client_id == "18446744073709551615"

    def test_big_integer_encoded_as_string(self):
        """Test that integers beyond int64 are written in the form they are read back in"""
        client = Client(client_id=2 ** 64)
        assert client.to_dict()["clientId"] == "18446744073709551616"

        decoded = Client.from_json(client.to_json())
        assert decoded.client_id == "18446744073709551616"
        assert decoded.to_json() == client.to_json()

        assert Client(client_id=-(2 ** 63)).to_dict()["clientId"] == -(2 ** 63)
        assert Client(client_id=2 ** 63).to_dict()["clientId"] == str(2 ** 63)

    def test_rejected_forms(self):
        """Test that booleans and containers are rejected"""
        with pytest.raises(ValidationError):
            Client.from_json('{"clientId": true}')
        with pytest.raises(ValidationError):
            Client.from_json('{"clientId": [1]}')


class TestEnumDecoding:
    """Test enum exactness on the wire"""

    def test_exact_name(self):
        """Test canonical names resolve to the member"""
        response = IntrospectionResponse.from_json('{"action": "OK"}')
        assert response.action is IntrospectionAction.OK

    def test_wrong_case(self):
        """Test that a differently cased name fails"""
        with pytest.raises(ValidationError):
            IntrospectionResponse.from_json('{"action": "ok"}')

    def test_number_is_type_error(self):
        """Test that a number fails with a type error"""
        with pytest.raises(TypeMismatchError):
            IntrospectionResponse.from_json('{"action": 123}')

    def test_null(self):
        """Test that null leaves the enum unset"""
        assert IntrospectionResponse.from_json('{"action": null}').action is None

    def test_enum_list(self):
        """Test enum lists on the wire"""
        client = Client.from_json('{"responseTypes": ["CODE", "ID_TOKEN"]}')
        assert client.response_types == [ResponseType.CODE, ResponseType.ID_TOKEN]
        assert client.to_dict()["responseTypes"] == ["CODE", "ID_TOKEN"]


class TestNestedDtos:
    """Test nested DTOs and lists of DTOs"""

    def test_list_of_strings_keeps_order(self):
        """Test string lists on the wire"""
        response = TokenResponse.from_json('{"scopes": ["a", "b"]}')
        assert response.scopes == ["a", "b"]
        with pytest.raises(ValidationError):
            TokenResponse.from_json('{"scopes": "a b"}')

    def test_list_of_dtos_keeps_order(self):
        """Test positional access to nested scopes"""
        service = Service.from_json('{"supportedScopes": [{"name": "a"}, {"name": "b"}]}')
        assert [scope.name for scope in service.supported_scopes] == ["a", "b"]
        assert isinstance(service.supported_scopes[0], Scope)

    def test_nested_dto(self):
        """Test a nested object"""
        response = AuthorizationResponse.from_json(
            '{"action": "INTERACTION", "client": {"clientId": 57, "clientName": "demo"}}')
        assert isinstance(response.client, Client)
        assert response.client.client_id == 57
        assert response.client.get_client_name() == "demo"

    @pytest.mark.parametrize("wire", ['true', '12', '"client"', '[]'])
    def test_nested_dto_rejects_non_objects(self, wire):
        """Test that scalars in place of an object raise a type error"""
        with pytest.raises(TypeMismatchError):
            AuthorizationResponse.from_json('{"client": %s}' % wire)

    def test_list_of_dtos_rejects_non_arrays(self):
        """Test that a list of DTOs must be an array of objects"""
        with pytest.raises(TypeMismatchError):
            Service.from_json('{"supportedScopes": {"name": "a"}}')
        with pytest.raises(TypeMismatchError):
            Service.from_json('{"supportedScopes": [{"name": "a"}, "b"]}')

    def test_nested_null(self):
        """Test that null nested values stay None"""
        response = AuthorizationResponse.from_json('{"client": null}')
        assert response.client is None


class TestJsonContract:
    """Test the JSON entry points"""

    def test_malformed_json(self):
        """Test that malformed JSON raises JsonParseError"""
        with pytest.raises(JsonParseError):
            Client.from_json('{"clientId": ')

    def test_non_object_json(self):
        """Test that a JSON array is not a DTO"""
        with pytest.raises(JsonParseError):
            Client.from_json('[{"clientId": 1}]')

    def test_none(self):
        """Test that None maps to None in both directions"""
        assert Client.from_json(None) is None
        assert Client.from_dict(None) is None
        assert to_json(None) is None

    def test_from_dict_requires_mapping(self):
        """Test that from_dict rejects scalars"""
        with pytest.raises(TypeMismatchError):
            Client.from_dict("clientId")

    def test_to_json_compact_and_pretty(self):
        """Test JSON rendering"""
        pair = Pair("lang", "en")
        assert pair.to_json() == '{"key":"lang","value":"en"}'
        assert to_json(pair, pretty=True) == '{\n  "key": "lang",\n  "value": "en"\n}'

    def test_array_aliases(self):
        """Test to_array and from_array"""
        prop = Property("k", "v", True)
        assert prop.to_array() == {"key": "k", "value": "v", "hidden": True}
        assert Property.from_array(prop.to_array()) == prop

    def test_equality_and_repr(self):
        """Test field equality and the compact repr"""
        assert TaggedValue("en", "x") == TaggedValue("en", "x")
        assert TaggedValue("en", "x") != TaggedValue("fr", "x")
        assert TaggedValue("en", "x") != Pair("en", "x")
        assert repr(TaggedValue("en", None)) == "TaggedValue(tag='en')"

    def test_dtos_are_unhashable(self):
        """Test that mutable DTOs cannot be hashed"""
        with pytest.raises(TypeError):
            hash(TaggedValue("en", "x"))


class TestCustomDto:
    """Test declaring a new DTO on top of the base"""

    class Child(Dto):
        pass

    def test_declared_fields_only(self):
        """Test a DTO declared outside the catalog"""

        class Leaf(Dto):
            items = DtoListField(Pair)
            main = DtoField(Pair, key="primary")

        leaf = Leaf.from_dict({"items": [{"key": "a"}], "primary": {"key": "b"}})
        assert leaf.items[0].key == "a"
        assert leaf.main.key == "b"
        assert json.loads(leaf.to_json()) == {
            "items": [{"key": "a", "value": None}],
            "primary": {"key": "b", "value": None},
        }
        assert self.Child().to_dict() == {}


def _sample_value(field, depth):
    """A non-default value of the kind ``field`` holds"""
    if isinstance(field, DtoField):
        return _populated(field.dto_type, depth + 1)
    if isinstance(field, DtoListField):
        return [_populated(field.dto_type, depth + 1)]
    if isinstance(field, EnumListField):
        return [list(field.enum_type)[0]]
    if isinstance(field, EnumField):
        return list(field.enum_type)[-1]
    if isinstance(field, StringListField):
        return ["first", "second"]
    if isinstance(field, (BooleanField, NullableBooleanField)):
        return True
    if isinstance(field, IntegerField):
        return 42
    if isinstance(field, StringOrIntegerField):
        return 5899463614448063
    return f"{field.name}-value"


def _populated(dto_type, depth=0):
    instance = dto_type()
    if depth > 2:
        return instance
    for field in dto_type.fields():
        setattr(instance, field.name, _sample_value(field, depth))
    return instance


DTO_TYPES = sorted(
    {value for value in vars(dto_package).values()
     if isinstance(value, type) and issubclass(value, Dto)},
    key=lambda dto_type: dto_type.__name__)


class TestRoundTrip:
    """Test that every DTO survives JSON with all fields populated"""

    def test_catalog_is_collected(self):
        """Test that the catalog classes are all picked up"""
        assert Client in DTO_TYPES
        assert TokenResponse in DTO_TYPES
        assert len(DTO_TYPES) > 70

    @pytest.mark.parametrize("dto_type", DTO_TYPES, ids=lambda t: t.__name__)
    def test_round_trip(self, dto_type):
        """Test from_json(to_json(x)) == x and stable JSON output"""
        original = _populated(dto_type)
        text = original.to_json()

        decoded = dto_type.from_json(text)

        assert decoded == original
        assert decoded.to_json() == text
        assert dto_type.from_dict(original.to_dict()) == original
