"""
Tests for serialization engines
"""
import json
from typing import List, Optional
from unittest.mock import patch

import pytest
from google.protobuf import api_pb2
from google.protobuf.json_format import ParseError
from pydantic import ValidationError

from seam_convert.converter import ConversionError, JsonConverter
from seam_convert.engines import (
    JsonParseError,
    JsonSerializeError,
    ProtobufEngine,
    PydanticEngine,
)
from seam_convert.engines.protobuf_engine import dict_to_protobuf, protobuf_to_dict
from seam_convert.engines.pydantic_engine import adapter_for
from seam_convert.mime import TypedByteArray

from sample_models import Account, Item


@pytest.fixture
def echo_api():
    """Nested protobuf message used as a target type"""
    return api_pb2.Api(
        name="seam.Echo",
        version="v1",
        methods=[
            api_pb2.Method(
                name="Call",
                request_type_url="type.googleapis.com/seam.EchoRequest",
                response_streaming=True,
            ),
        ],
    )


class TestPydanticEngine:
    """Test pydantic structural mapping"""

    def test_compact_output(self):
        """Test output carries no insignificant whitespace"""
        engine = PydanticEngine()
        assert engine.to_json(Item(name="a", quantity=1)) == '{"name":"a","quantity":1,"tags":[]}'

    def test_by_alias(self):
        """Test aliases are JSON keys by default and field names on request"""
        account = Account(accountId="acc-1", displayName="Ada")

        assert json.loads(PydanticEngine().to_json(account)) == {
            "accountId": "acc-1",
            "displayName": "Ada",
        }
        assert json.loads(PydanticEngine(by_alias=False).to_json(account)) == {
            "account_id": "acc-1",
            "display_name": "Ada",
        }

    def test_aliased_round_trip(self):
        """Test default output parses back into an equal model"""
        engine = PydanticEngine()
        account = Account(accountId="acc-3", displayName="Grace")
        assert engine.from_json(engine.to_json(account), Account) == account

    def test_exclude_none(self):
        """Test None fields are dropped when requested"""
        engine = PydanticEngine(by_alias=True, exclude_none=True)
        assert engine.to_json(Account(accountId="acc-1")) == '{"accountId":"acc-1"}'

    def test_parse_by_alias(self):
        """Test aliased keys are matched on parse"""
        account = PydanticEngine().from_json('{"accountId": "acc-2"}', Account)
        assert account.account_id == "acc-2"
        assert account.display_name is None

    def test_strict(self):
        """Test strict mode disables coercion"""
        assert PydanticEngine().from_json('"5"', int) == 5

        with pytest.raises(JsonParseError) as exc_info:
            PydanticEngine(strict=True).from_json('"5"', int)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_optional_target(self):
        """Test Optional targets accept null"""
        assert PydanticEngine().from_json("null", Optional[Item]) is None

    def test_unserializable(self):
        """Test unknown objects raise JsonSerializeError"""
        with pytest.raises(JsonSerializeError):
            PydanticEngine().to_json(object())

    def test_options(self):
        """Test options export"""
        assert PydanticEngine(strict=True).options() == {
            "by_alias": True,
            "exclude_none": False,
            "strict": True,
        }


class TestAdapterCache:
    """Test TypeAdapter reuse across decodes"""

    def test_hashable_types_are_cached(self):
        """Test the same adapter is returned for repeated target types"""
        assert adapter_for(Item) is adapter_for(Item)
        assert adapter_for(List[Item]) is adapter_for(List[Item])

    def test_unhashable_types_are_built_each_time(self):
        """Test unhashable descriptors bypass the cache instead of failing"""
        unhashable = [Item]
        with patch("seam_convert.engines.pydantic_engine.TypeAdapter") as type_adapter:
            adapter_for(unhashable)
            adapter_for(unhashable)
        assert type_adapter.call_count == 2
        type_adapter.assert_called_with(unhashable)


class TestProtobufEngine:
    """Test protobuf message mapping"""

    def test_to_json_preserves_field_names(self, echo_api):
        """Test proto field names are used as JSON keys"""
        data = json.loads(ProtobufEngine().to_json(echo_api))

        assert data["name"] == "seam.Echo"
        assert data["version"] == "v1"
        assert data["methods"][0]["request_type_url"] == "type.googleapis.com/seam.EchoRequest"
        assert data["methods"][0]["response_streaming"] is True

    def test_round_trip(self, echo_api):
        """Test message survives to_json/from_json"""
        engine = ProtobufEngine()
        assert engine.from_json(engine.to_json(echo_api), api_pb2.Api) == echo_api

    def test_empty_object(self):
        """Test empty JSON object yields a default message"""
        assert ProtobufEngine().from_json("{}", api_pb2.Api) == api_pb2.Api()

    def test_none_serializes_to_empty_object(self):
        assert ProtobufEngine().to_json(None) == "{}"

    def test_malformed_json(self):
        """Test malformed JSON raises JsonParseError"""
        with pytest.raises(JsonParseError) as exc_info:
            ProtobufEngine().from_json("{not json", api_pb2.Api)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_non_object_json(self):
        """Test JSON arrays cannot become messages"""
        with pytest.raises(JsonParseError):
            ProtobufEngine().from_json("[1, 2]", api_pb2.Api)

    def test_unknown_field(self):
        """Test unknown fields fail unless ignored"""
        with pytest.raises(JsonParseError) as exc_info:
            ProtobufEngine().from_json('{"name": "x", "bogus": 1}', api_pb2.Api)
        assert isinstance(exc_info.value.__cause__, ParseError)

        api = ProtobufEngine(ignore_unknown_fields=True).from_json('{"name": "x", "bogus": 1}', api_pb2.Api)
        assert api.name == "x"

    def test_type_mismatch(self):
        """Test wrong value types raise JsonParseError"""
        with pytest.raises(JsonParseError):
            ProtobufEngine().from_json('{"methods": [{"request_streaming": "yes"}]}', api_pb2.Api)

    def test_non_message_target(self):
        """Test non-message targets are a programming error"""
        with pytest.raises(TypeError):
            ProtobufEngine().from_json("{}", dict)

    def test_non_message_object(self):
        """Test non-message objects cannot be serialized"""
        with pytest.raises(JsonSerializeError):
            ProtobufEngine().to_json({"name": "x"})

    def test_dict_helpers(self, echo_api):
        """Test dictionary conversion helpers"""
        data = protobuf_to_dict(echo_api)
        assert data["methods"][0]["name"] == "Call"
        assert dict_to_protobuf(data, api_pb2.Api) == echo_api
        assert protobuf_to_dict(None) == {}
        assert dict_to_protobuf({}, api_pb2.Api) == api_pb2.Api()


class TestProtobufConverter:
    """Test JsonConverter backed by the protobuf engine"""

    def test_round_trip(self, echo_api):
        """Test protobuf message through request and response bodies"""
        converter = JsonConverter(engine=ProtobufEngine())
        body = converter.to_body(echo_api)

        assert body.mime_type() == "application/json; charset=UTF-8"
        assert converter.from_body(body.as_input(), api_pb2.Api) == echo_api

    def test_parse_error_is_wrapped(self):
        """Test protobuf parse errors surface as ConversionError"""
        converter = JsonConverter(engine=ProtobufEngine())
        body = TypedByteArray("application/json", b'{"bogus": true}')

        with pytest.raises(ConversionError) as exc_info:
            converter.from_body(body, api_pb2.Api)
        assert isinstance(exc_info.value.__cause__, JsonParseError)

    def test_wrong_target_propagates(self, make_input):
        """Test misuse is not disguised as a conversion failure, and the stream is still closed"""
        converter = JsonConverter(engine=ProtobufEngine())
        body = make_input(b"{}", "application/json")

        with pytest.raises(TypeError):
            converter.from_body(body, dict)
        assert body.stream.close_count == 1
