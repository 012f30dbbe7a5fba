from __future__ import annotations

from listgen.services.listing_content import append_keyword_footer, compose_title


def test_compose_title_reference_case():
    assert compose_title("Sony", "WH-1000XM4", "Electronics", {"color": "Black"}) == "Sony WH-1000XM4 Black"


def test_compose_title_category_specific_attributes():
    assert compose_title("Apple", "iPhone 13", "Electronics", {"storage": "128GB", "color": "Blue"}) == (
        "Apple iPhone 13 128GB Blue"
    )
    assert compose_title("Nike", "Air Max 90", "Fashion", {"size": "10", "color": "White"}) == (
        "Nike Air Max 90 Size 10 White"
    )
    # storage only counts for Electronics, size only for Fashion
    assert compose_title("Nike", "Air Max 90", "Electronics", {"size": "10"}) == "Nike Air Max 90"
    assert compose_title("Apple", "iPad", "Fashion", {"storage": "64GB"}) == "Apple iPad"


def test_compose_title_skips_empty_parts_and_truncates():
    assert compose_title("", "RX100", "Product") == "RX100"
    assert compose_title(None, None, None) == ""
    assert compose_title("B" * 150, "M" * 150, "Other") == ("B" * 150 + " " + "M" * 150)[:200]
    assert len(compose_title("B" * 50, "M" * 50, "Other", max_length=60)) == 60


def test_footer_references_first_three_and_full_list():
    out = append_keyword_footer("Great headphones.", ["sony", "xm4", "anc", "bluetooth"])
    assert out == (
        "Great headphones.\n\nPerfect for those searching for sony, xm4, anc. "
        "This listing includes everything shown in the photos. "
        "Keywords: sony, xm4, anc, bluetooth."
    )


def test_footer_is_deterministic_and_noop_without_keywords():
    assert append_keyword_footer("Desc", ["a"]) == append_keyword_footer("Desc", ["a"])
    assert append_keyword_footer("Desc", []) == "Desc"
    assert append_keyword_footer("Desc", ["", ""]) == "Desc"
