from unittest.mock import MagicMock, patch

from specdoc.ai.token_budget import TokenBudgetEstimator, approx_tokens_for_chars


def test_approx_tokens_for_chars_rounds_up():
    assert approx_tokens_for_chars(120_000) == 30_000
    assert approx_tokens_for_chars(5) == 2
    assert approx_tokens_for_chars(1) == 1
    assert approx_tokens_for_chars(0) == 0


def test_unknown_model_uses_fallback_encoding():
    with patch("specdoc.ai.token_budget.tiktoken") as tk:
        tk.encoding_for_model.side_effect = KeyError("unknown-model")
        enc = MagicMock()
        enc.encode.return_value = list(range(7))
        tk.get_encoding.return_value = enc

        est = TokenBudgetEstimator()
        result = est.estimate_messages_tokens(
            [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}],
            model="unknown-model",
            hint=5,
        )
        est.estimate_text_tokens("again", model="unknown-model")

    assert result.tokens_in == 7
    assert result.exceeds_hint is True
    tk.get_encoding.assert_called_once_with("cl100k_base")
    tk.encoding_for_model.assert_called_once_with("unknown-model")


def test_hint_not_exceeded_or_absent():
    with patch("specdoc.ai.token_budget.tiktoken") as tk:
        enc = MagicMock()
        enc.encode.return_value = [1, 2, 3]
        tk.encoding_for_model.return_value = enc

        est = TokenBudgetEstimator()
        assert est.estimate_messages_tokens([], model="gpt-4o", hint=10).exceeds_hint is False
        assert est.estimate_messages_tokens([], model="gpt-4o").exceeds_hint is False


def test_encoding_load_failure_falls_back_to_char_heuristic():
    with patch("specdoc.ai.token_budget.tiktoken") as tk:
        tk.encoding_for_model.side_effect = OSError("offline")

        est = TokenBudgetEstimator()
        text = "x" * 41
        assert est.estimate_text_tokens(text, model="gpt-5-mini") == approx_tokens_for_chars(41)
        assert est.estimate_text_tokens(text, model="gpt-5-mini") == 11

    # A failed load is remembered; no second download attempt per model.
    tk.encoding_for_model.assert_called_once_with("gpt-5-mini")


def test_unknown_model_with_unloadable_fallback_encoding():
    with patch("specdoc.ai.token_budget.tiktoken") as tk:
        tk.encoding_for_model.side_effect = KeyError("mystery")
        tk.get_encoding.side_effect = OSError("offline")

        result = TokenBudgetEstimator().estimate_messages_tokens(
            [{"role": "user", "content": "y" * 400}], model="mystery", hint=50
        )

    assert result.tokens_in == approx_tokens_for_chars(len("user: " + "y" * 400))
    assert result.exceeds_hint is True


def test_encode_failure_falls_back_to_char_heuristic():
    with patch("specdoc.ai.token_budget.tiktoken") as tk:
        enc = MagicMock()
        enc.encode.side_effect = ValueError("bad text")
        tk.encoding_for_model.return_value = enc

        assert TokenBudgetEstimator().estimate_text_tokens("abcd" * 3, model="gpt-4o") == 3
