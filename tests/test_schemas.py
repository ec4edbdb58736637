import pytest
from pydantic import ValidationError

from openai_lite.schemas import (
    ChatArguments,
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    CompletionArguments,
    CompletionChoice,
    EditResponse,
    EmbeddingsArguments,
    ImageArguments,
    ImageObject,
    Role,
)


def _chat_args() -> ChatArguments:
    return ChatArguments(model="gpt-3.5-turbo", messages=[ChatMessage.user("Hello GPT!")])


# 1) Request arguments
def test_set_is_chainable_and_validated():
    args = _chat_args().set(temperature=0.2, max_tokens=64).set(stop=["\n"])
    assert args.temperature == 0.2
    assert args.max_tokens == 64
    assert args.to_payload()["stop"] == ["\n"]

    with pytest.raises(ValidationError):
        args.set(temperature="hot")


def test_set_rejects_unknown_field():
    with pytest.raises(AttributeError):
        _chat_args().set(temprature=0.2)


def test_payload_omits_unset_fields():
    assert _chat_args().to_payload() == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "user", "content": "Hello GPT!"}],
    }
    emb = EmbeddingsArguments(model="text-embedding-ada-002", input=["a", "b"])
    assert emb.to_payload() == {"model": "text-embedding-ada-002", "input": ["a", "b"]}


def test_message_constructors_serialize_roles():
    msgs = [ChatMessage.system("s"), ChatMessage.user("u"), ChatMessage.assistant("a")]
    assert [m.model_dump(mode="json")["role"] for m in msgs] == ["system", "user", "assistant"]
    assert ChatMessage(role="user", content="hi").role is Role.USER
    with pytest.raises(ValidationError):
        ChatMessage(role="tool", content="hi")


@pytest.mark.parametrize(
    "model,fields",
    [
        (CompletionArguments, {"model": "m", "prompt": "p", "logprobs": 6}),
        (ImageArguments, {"prompt": "p", "n": 11}),
        (ImageArguments, {"prompt": "p", "size": "300x300"}),
        (ImageArguments, {"prompt": "p", "response_format": "png"}),
    ],
)
def test_argument_bounds(model, fields):
    with pytest.raises(ValidationError):
        model(**fields)


# 2) Responses
def test_unknown_response_keys_are_kept():
    res = ChatCompletion.model_validate(
        {
            "id": "chatcmpl-1",
            "created": 1,
            "choices": [{"index": 0, "message": {"role": "assistant", "content": None}}],
            "system_fingerprint": "fp_44709d6fcb",
        }
    )
    assert res.system_fingerprint == "fp_44709d6fcb"
    assert res.choices[0].message.content == ""
    assert res.usage is None


def test_logprobs_allow_null_entries():
    choice = CompletionChoice.model_validate(
        {
            "text": "Say this",
            "index": 0,
            "logprobs": {
                "tokens": ["Say", " this"],
                "token_logprobs": [None, -1.5],
                "top_logprobs": [None, {" this": -1.5}],
                "text_offset": [0, 3],
            },
        }
    )
    assert choice.logprobs.token_logprobs == [None, -1.5]
    assert choice.finish_reason is None


def test_chunk_str():
    chunk = ChatCompletionChunk.model_validate(
        {"id": "c", "created": 1, "choices": [{"index": 0, "delta": {"content": "Hi"}}]}
    )
    assert str(chunk) == "Hi"
    empty = ChatCompletionChunk.model_validate({"id": "c", "created": 1, "choices": []})
    assert str(empty) == ""


def test_edit_response_str_without_choices():
    res = EditResponse.model_validate(
        {"created": 1, "choices": [], "usage": {"prompt_tokens": 1, "completion_tokens": 0, "total_tokens": 1}}
    )
    assert str(res) == ""


def test_image_object_needs_a_payload():
    assert ImageObject(b64_json="aGk=").value == "aGk="
    with pytest.raises(ValidationError):
        ImageObject()
