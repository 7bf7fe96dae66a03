from __future__ import annotations

import itertools

import pytest

from recipe_normalizer.parsers.image import UNBOUNDED_AREA, calculate_image_area, select_best_image


@pytest.mark.parametrize(
    "images, expected",
    [
        ("https://example.com/image.jpg", "https://example.com/image.jpg"),
        ("  https://example.com/image.jpg  ", "https://example.com/image.jpg"),
        ({"@type": "ImageObject", "url": "https://example.com/image.jpg"}, "https://example.com/image.jpg"),
        ([{"@type": "ImageObject", "url": "https://example.com/image1.jpg"}], "https://example.com/image1.jpg"),
        ({"@type": "ImageObject", "contentUrl": "https://example.com/content.jpg"}, "https://example.com/content.jpg"),
        ({"thumbnailUrl": "https://example.com/thumb.jpg"}, "https://example.com/thumb.jpg"),
        (
            [
                "https://example.com/image-225x225.jpg",
                "https://example.com/image-260x195.jpg",
                "https://example.com/image.jpg",
                "https://example.com/image-320x180.jpg",
            ],
            "https://example.com/image.jpg",
        ),
        (
            [
                {"@type": "ImageObject", "url": "https://example.com/small.jpg", "width": "100", "height": "100"},
                {"@type": "ImageObject", "url": "https://example.com/large.jpg", "width": "1000", "height": "1000"},
            ],
            "https://example.com/large.jpg",
        ),
        (
            [
                {"@type": "ImageObject"},
                "https://example.com/valid.jpg",
                {"contentUrl": "https://example.com/content.jpg"},
            ],
            "https://example.com/valid.jpg",
        ),
        (
            [
                "https://example.com/a-100x100.jpg",
                "https://example.com/b-100x100.jpg",
            ],
            "https://example.com/a-100x100.jpg",
        ),
    ],
)
def test_select_best_image(images, expected):
    assert select_best_image(images) == expected


@pytest.mark.parametrize(
    "images",
    [None, "", "   ", [], {"@type": "ImageObject"}, [{"url": ["a.jpg"]}], 42, [None, 3]],
)
def test_select_best_image_absent(images):
    assert select_best_image(images) is None


def test_unsized_image_beats_sized_images():
    assert select_best_image(["img-225x225.jpg", "img.jpg"]) == "img.jpg"


def test_selection_is_independent_of_order():
    images = [
        "https://example.com/a-640x480.jpg",
        {"url": "https://example.com/b.jpg", "width": 1200, "height": 800},
        "https://example.com/c_300x300.png",
    ]
    for ordering in itertools.permutations(images):
        assert select_best_image(list(ordering)) == "https://example.com/b.jpg"


@pytest.mark.parametrize(
    "url, width, height, expected",
    [
        ("img.jpg", 100, 50, 5000),
        ("img.jpg", "1200px", "800px", 960000),
        ("img-10x10.jpg", 20, 20, 400),
        ("img-10x10.jpg", "wide", 20, 100),
        ("img_640x480.webp", None, None, 307200),
        ("img.jpg", None, 50, UNBOUNDED_AREA),
        ("img-640x480.jpg?w=1", None, None, UNBOUNDED_AREA),
    ],
)
def test_calculate_image_area(url, width, height, expected):
    assert calculate_image_area(url, width, height) == expected


def test_unsized_image_beats_any_declared_area():
    images = [{"url": "sized.jpg", "width": 10**10, "height": 10**10}, "plain.jpg"]
    assert select_best_image(images) == "plain.jpg"


@pytest.mark.parametrize(
    "images, expected",
    [
        ({"url": "a.jpg", "width": "9" * 5000, "height": "1"}, "a.jpg"),
        ([{"url": "a.jpg", "width": "9" * 5000, "height": "1"}, "b-10x10.jpg"], "a.jpg"),
        ("a-" + "9" * 5000 + "x2.jpg", "a-" + "9" * 5000 + "x2.jpg"),
        ([{"url": "big.jpg", "width": 10**400, "height": 1.5}, "c-10x10.jpg"], "big.jpg"),
    ],
)
def test_select_best_image_with_oversized_dimensions(images, expected):
    assert select_best_image(images) == expected


def test_calculate_image_area_with_overflowing_dimensions():
    assert calculate_image_area("img.jpg", 10**400, 1.5) == UNBOUNDED_AREA
    assert calculate_image_area("img.jpg", float("inf"), 10) == UNBOUNDED_AREA
