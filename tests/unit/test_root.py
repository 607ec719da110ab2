"""Tests for finding the root container of a page."""

from navigation_helpers.core.tree.root import RootFinder
from navigation_helpers.models.page import Navigation, Page


def test_set_root_short_circuits_the_walk() -> None:
    other = Navigation()
    page = Page("orphan")
    finder = RootFinder()
    finder.set_root(other)
    assert finder.find(page) is other


def test_find_walks_up_to_the_navigation() -> None:
    parent, page = Page("parent"), Page("page")
    parent.add_page(page)
    nav = Navigation([parent])
    assert RootFinder().find(page) is nav


def test_page_without_parent_is_its_own_root() -> None:
    page = Page("alone")
    assert RootFinder().find(page) is page


def test_detached_subtree_root_is_top_page() -> None:
    top, child = Page("top"), Page("child")
    top.add_page(child)
    assert RootFinder().find(child) is top


def test_root_is_remembered_until_reset() -> None:
    first_nav = Navigation([Page("a")])
    second_page = Page("b")
    second_nav = Navigation([second_page])
    finder = RootFinder()

    assert finder.find(first_nav.pages[0]) is first_nav
    assert finder.find(second_page) is first_nav

    finder.set_root(None)
    assert finder.find(second_page) is second_nav
