import pytest

from threadgrab import extract_thumbnail


@pytest.mark.unit
class Describe_extract_thumbnail:
    def test_given_property_first_should_extract(self):
        """property 在前时应提取封面。"""
        html = '<meta property="og:image" content="https://cdn/t.jpg" />'
        assert extract_thumbnail(html) == "https://cdn/t.jpg"

    def test_given_content_first_should_extract(self):
        """content 在前时也应提取封面。"""
        html = '<meta content="https://cdn/t.jpg" property="og:image">'
        assert extract_thumbnail(html) == "https://cdn/t.jpg"

    def test_should_decode_entities(self, post_video_html):
        """封面链接中的 &amp; 应还原。"""
        assert extract_thumbnail(post_video_html) == (
            "https://scontent.cdninstagram.com/v/t51/thumb.jpg?stp=dst-jpg&_nc_ht=scontent"
        )

    @pytest.mark.parametrize("html", ["", None, "<html></html>", '<meta property="og:title" content="x">'])
    def test_given_no_og_image_should_return_none(self, html):
        """没有 og:image 时应返回 None。"""
        assert extract_thumbnail(html) is None
