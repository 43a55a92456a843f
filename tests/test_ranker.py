import pytest

from helpdesk import prompts
from helpdesk.ranker import (
    FALLBACK_CATEGORY,
    classify_category,
    compose_answer,
    composite_score,
    rank_faqs,
    score,
    tokenize,
)


def test_tokenize_drops_surrounding_whitespace():
    assert tokenize("  Hello \t  World \n") == ["hello", "world"]


def test_score_ignores_leading_and_trailing_whitespace():
    assert score("  hello  ", "hello") == 1.0


def test_score_of_two_empty_texts_is_zero():
    assert score("", "") == 0.0
    assert score("   ", "\n") == 0.0


def test_score_is_case_insensitive():
    assert score("Create ACCOUNT", "create account") == 1.0


def test_score_divides_by_longer_sequence():
    assert score("alpha beta", "alpha gamma delta epsilon") == pytest.approx(0.25)


def test_score_counts_each_query_occurrence():
    assert score("alpha alpha beta", "alpha") == pytest.approx(2 / 3)


def test_composite_weights_question_over_answer_and_category(make_faq):
    faq = make_faq(1, "alpha", answer="alpha", category="alpha")
    assert composite_score("alpha", faq) == pytest.approx(1.8)


def test_exact_question_ranks_first(faqs):
    ranked = rank_faqs("How do I create an account?", faqs, 1)

    assert [faq.id for faq in ranked] == [1]
    assert classify_category("How do I create an account?", faqs) == "Getting Started"


def test_ties_keep_corpus_order(make_faq):
    corpus = [make_faq(3, "alpha"), make_faq(1, "alpha"), make_faq(2, "alpha")]

    ranked = rank_faqs("alpha", corpus, 3)

    assert [faq.id for faq in ranked] == [3, 1, 2]


def test_scores_at_or_below_threshold_are_dropped(make_faq):
    corpus = [
        make_faq(1, "alpha " + " ".join(f"w{i}" for i in range(9))),
        make_faq(2, "alpha " + " ".join(f"w{i}" for i in range(19))),
        make_faq(3, "alpha beta"),
    ]

    ranked = rank_faqs("alpha", corpus, 3)

    assert [faq.id for faq in ranked] == [3]


def test_limit_is_respected(faqs):
    assert len(rank_faqs("How do I create a blog post?", faqs, 2)) <= 2
    assert rank_faqs("How do I create a blog post?", faqs, 0) == []


def test_ranking_is_deterministic(faqs):
    query = "Can I edit my blog posts?"

    assert rank_faqs(query, faqs) == rank_faqs(query, faqs)
    assert compose_answer(query, faqs) == compose_answer(query, faqs)


def test_unrelated_query_falls_back(faqs):
    query = "Bitcoin price USD today"

    assert rank_faqs(query, faqs) == []
    answer = compose_answer(query, faqs)
    assert f'"{query}"' in answer
    assert "Creating an account and logging in" in answer
    assert "Troubleshooting common issues" in answer
    assert classify_category(query, faqs) == FALLBACK_CATEGORY


def test_single_match_returns_answer_with_closing(make_faq):
    corpus = [make_faq(1, "alpha beta", answer="Use the alpha page."), make_faq(2, "gamma")]

    answer = compose_answer("alpha beta", corpus)

    assert answer == f"Use the alpha page.\n\n{prompts.SINGLE_MATCH_CLOSING}"


def test_multiple_matches_render_sections_in_rank_order(make_faq):
    corpus = [
        make_faq(1, "alpha gamma", answer="Second."),
        make_faq(2, "alpha beta", answer="First."),
        make_faq(3, "delta"),
    ]

    answer = compose_answer("alpha beta", corpus)

    assert answer == (
        "Here's what I found that might help:\n\n"
        "**alpha beta**\nFirst.\n\n"
        "**alpha gamma**\nSecond.\n\n"
        f"{prompts.MULTI_MATCH_CLOSING}"
    )


def test_exact_question_leads_composed_answer(faqs):
    answer = compose_answer("How do I create an account?", faqs)

    assert answer.startswith(
        f"{prompts.MULTI_MATCH_INTRO}\n\n**How do I create an account?**\n{faqs[0].answer}\n\n"
    )
    assert answer.endswith(prompts.MULTI_MATCH_CLOSING)
