from brand_dna.typography import extract_fonts, primary_family

from tests.conftest import FakePage


def test_primary_family_strips_quotes():
    assert primary_family('"Helvetica Neue", Arial, sans-serif') == "Helvetica Neue"
    assert primary_family("'Inter'") == "Inter"
    assert primary_family("Georgia") == "Georgia"
    assert primary_family(None) is None


async def test_heading_falls_through_selectors():
    page = FakePage(fonts={"body": "Roboto, sans-serif", "h2": '"Playfair Display", serif'})
    fonts = await extract_fonts(page)
    assert fonts.body == "Roboto"
    assert fonts.heading == "Playfair Display"


async def test_missing_elements_give_none():
    fonts = await extract_fonts(FakePage())
    assert fonts.body is None
    assert fonts.heading is None
