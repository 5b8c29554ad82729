from cyberkit.textgeneration import (
    InputSequenceTooLongError,
    Options,
    Response,
    default_model_for_machine_translation,
    default_options,
    default_options_for_text_paraphrasing,
    prepare_input_for_abstractive_question_answering,
    strip_special_tokens,
    wrap_bos_eos,
)


def test_machine_translation_model_name():
    assert default_model_for_machine_translation("en", "it") == "Helsinki-NLP/opus-mt-en-it"


def test_machine_translation_model_name_keeps_order():
    forward = default_model_for_machine_translation("de", "fr")
    backward = default_model_for_machine_translation("fr", "de")
    assert forward.endswith("de-fr")
    assert backward.endswith("fr-de")


def test_default_options():
    opts = default_options()
    assert opts == Options(temperature=1.0, sample=False, top_k=None, top_p=None)


def test_default_options_are_fresh_objects():
    first = default_options()
    first.temperature = 3.0
    assert default_options().temperature == 1.0


def test_paraphrasing_options():
    opts = default_options_for_text_paraphrasing()
    assert opts.temperature == 1.5
    assert opts.sample is True
    assert opts.top_k == 120
    assert opts.top_p is None


def test_prepare_input_for_abstractive_question_answering():
    text = prepare_input_for_abstractive_question_answering("Why?", ["first", "second"])
    assert text == "question: Why? context: <P> first <P> second"


def test_prepare_input_single_passage():
    text = prepare_input_for_abstractive_question_answering("Q", ["only"])
    assert text == "question: Q context: <P> only"


def test_prepare_input_no_passages():
    text = prepare_input_for_abstractive_question_answering("Q", [])
    assert text == "question: Q context: <P> "


def test_strip_special_tokens():
    assert strip_special_tokens([0, 5, 2, 7, 1, 2], {0, 1, 2}) == [5, 7]


def test_strip_special_tokens_keeps_order_and_others():
    ids = [9, 8, 7, 6]
    assert strip_special_tokens(ids, []) == ids


def test_wrap_bos_eos():
    assert wrap_bos_eos([10, 11], 0, 2) == [0, 10, 11, 2]


def test_wrap_then_strip_round_trip():
    ids = [4, 5, 6]
    assert strip_special_tokens(wrap_bos_eos(ids, 0, 2), {0, 2}) == ids


def test_response_defaults_empty():
    response = Response()
    assert response.texts == [] and response.scores == []


def test_input_sequence_too_long_error():
    err = InputSequenceTooLongError(1025, 1024)
    assert "1025 > 1024" in str(err)
    assert isinstance(err, Exception)