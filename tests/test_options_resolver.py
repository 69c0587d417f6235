from logging import WARNING

from bs4 import BeautifulSoup
from pytest import LogCaptureFixture, fixture, mark

from autofragment.components.elements import SoupElement
from autofragment.components.options_resolver import OptionsResolver, parse_directive
from autofragment.models import FragmentOptions, PartialOptions


def _element(html: str) -> SoupElement:
    return SoupElement(BeautifulSoup(html, "html.parser").find())


def _resolver(base_options: FragmentOptions | None = None) -> OptionsResolver:
    return OptionsResolver(
        base_options=FragmentOptions() if base_options is None else base_options,
        directive_attr="data-auto-fragment",
        title_class="title-slide",
    )


@fixture
def resolver() -> OptionsResolver:
    return _resolver()


@mark.parametrize(
    ("directive", "expected"),
    [
        ("", PartialOptions(enabled=True)),
        ("false", PartialOptions(enabled=False)),
        ("2", PartialOptions(enabled=True, skip=2)),
        (
            "1,+5,2",
            PartialOptions(
                enabled=True, skip=1, index_start=5, init_relative=True, index_step=2
            ),
        ),
        (",-5", PartialOptions(enabled=True, index_start=-5, init_relative=False)),
        (",,5", PartialOptions(enabled=True, index_step=5)),
        (
            " 3 , 20 , 5 ",
            PartialOptions(
                enabled=True, skip=3, index_start=20, init_relative=False, index_step=5
            ),
        ),
        (
            "1,2,3,4",
            PartialOptions(
                enabled=True, skip=1, index_start=2, init_relative=False, index_step=3
            ),
        ),
    ],
)
def test_parse_directive(directive: str, expected: PartialOptions) -> None:
    assert parse_directive(directive) == expected


@mark.parametrize("directive", ["False", "abc", "-1", "1.5"])
def test_parse_directive_malformed_skip(directive: str) -> None:
    assert parse_directive(directive) == PartialOptions(enabled=True)


def test_parse_directive_malformed_fields(caplog: LogCaptureFixture) -> None:
    with caplog.at_level(WARNING):
        partial = parse_directive("abc,+x,5")

    assert partial == PartialOptions(enabled=True, index_step=5)
    assert "'abc'" in caplog.text
    assert "'+x'" in caplog.text


def test_slide_without_directive(resolver: OptionsResolver) -> None:
    slide = _element("<section><p>a</p></section>")

    assert resolver.resolve_slide(slide) == FragmentOptions()


def test_directive_is_consumed(resolver: OptionsResolver) -> None:
    slide = _element('<section data-auto-fragment="1"><p>a</p></section>')

    options = resolver.resolve_slide(slide)

    assert options == FragmentOptions(enabled=True, skip=1)
    assert not slide.has_attr("data-auto-fragment")
    assert resolver.resolve_slide(slide) == FragmentOptions()


def test_title_slide_disabled() -> None:
    resolver = _resolver(FragmentOptions(enabled=True, index_step=5))
    slide = _element('<section class="title-slide"><h1>T</h1></section>')

    options = resolver.resolve_slide(slide)

    assert options == FragmentOptions(enabled=False, index_step=5)


def test_title_slide_with_directive(resolver: OptionsResolver) -> None:
    slide = _element(
        '<section class="title-slide" data-auto-fragment=""><h1>T</h1></section>'
    )

    assert resolver.resolve_slide(slide).enabled


def test_heading_wins(resolver: OptionsResolver) -> None:
    slide = _element(
        '<section data-auto-fragment="1,20">'
        '<h2 data-auto-fragment=",30">T</h2>'
        "</section>"
    )
    heading = slide.children[0]

    options = resolver.resolve_slide(slide, heading)

    assert options == FragmentOptions(enabled=True, skip=1, index_start=30)
    assert not heading.has_attr("data-auto-fragment")


def test_heading_disables(resolver: OptionsResolver) -> None:
    slide = _element(
        '<section data-auto-fragment="2,50">'
        '<h2 data-auto-fragment="false">T</h2>'
        "</section>"
    )

    options = resolver.resolve_slide(slide, slide.children[0])

    assert options == FragmentOptions(enabled=False, skip=2, index_start=50)


def test_resolve_element_uses_global_options() -> None:
    base_options = FragmentOptions(index_step=5)
    resolver = _resolver(base_options)
    element = _element('<div class="title-slide" data-auto-fragment=""></div>')

    options = resolver.resolve_element(element)

    assert options == FragmentOptions(enabled=True, index_step=5)
    assert resolver.base_options == base_options


def test_marked_elements_in_document_order(resolver: OptionsResolver) -> None:
    root = _element(
        "<div>"
        '<ul id="outer" data-auto-fragment=""><li data-auto-fragment="" id="inner">'
        "</li></ul>"
        '<ol id="last" data-auto-fragment="false"></ol>'
        "</div>"
    )

    marked = resolver.marked_elements(root)

    assert [element.get_attr("id") for element in marked] == [
        "outer",
        "inner",
        "last",
    ]


def test_restore_directives(resolver: OptionsResolver) -> None:
    slide = _element(
        '<section data-auto-fragment="false">'
        '<h2 data-auto-fragment="1,5">T</h2>'
        "</section>"
    )
    heading = slide.children[0]
    first = resolver.resolve_slide(slide, heading)

    assert resolver.restore_directives() == 2
    assert slide.get_attr("data-auto-fragment") == "false"
    assert heading.get_attr("data-auto-fragment") == "1,5"
    assert resolver.resolve_slide(slide, heading) == first
    assert resolver.restore_directives() == 2
    assert resolver.restore_directives() == 0
