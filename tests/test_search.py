import pytest

import threadgrab
from threadgrab.search import find_video_url


def _nest(inner, levels: int):
    for i in range(levels):
        inner = {"child": inner} if i % 2 else [inner]
    return inner


@pytest.mark.unit
class Describe_find_video_url:
    def test_given_video_versions_should_return_first_url(self):
        """应返回 video_versions 第一项的 url。"""
        data = {"video_versions": [{"url": "https://cdn/hd.mp4"}, {"url": "https://cdn/sd.mp4"}]}
        assert find_video_url(data) == "https://cdn/hd.mp4"

    def test_given_deeply_nested_object_should_still_find(self):
        """嵌套较深（未超限）时仍应找到。"""
        data = _nest({"video_versions": [{"url": "https://cdn/v.mp4"}]}, 30)
        assert find_video_url(data) == "https://cdn/v.mp4"

    def test_given_empty_video_versions_should_return_none(self):
        """video_versions 为空数组时应返回 None。"""
        data = {"thread_items": [{"post": {"video_versions": []}}]}
        assert find_video_url(data) is None

    def test_given_nesting_beyond_bound_should_return_none(self):
        """超过深度上限的分支应返回 None 而不是报错。"""
        data = _nest({"video_versions": [{"url": "https://cdn/deep.mp4"}]}, threadgrab.MAX_DEPTH + 5)
        assert find_video_url(data) is None

    def test_given_deep_branch_then_shallow_branch_should_find_shallow(self):
        """超深分支失败后，应继续搜索其他分支。"""
        data = [
            _nest({"video_versions": [{"url": "https://cdn/deep.mp4"}]}, 80),
            {"video_versions": [{"url": "https://cdn/shallow.mp4"}]},
        ]
        assert find_video_url(data) == "https://cdn/shallow.mp4"

    def test_should_visit_arrays_in_index_order(self):
        """数组应按下标顺序遍历，先到先得。"""
        data = [
            {"post": {"video_versions": [{"url": "https://cdn/first.mp4"}]}},
            {"post": {"video_versions": [{"url": "https://cdn/second.mp4"}]}},
        ]
        assert find_video_url(data) == "https://cdn/first.mp4"

    def test_given_first_version_without_url_should_keep_searching(self):
        """第一项没有 url 时应继续向下搜索。"""
        data = {
            "video_versions": [{"type": 101}],
            "carousel": [{"video_versions": [{"url": "https://cdn/next.mp4"}]}],
        }
        assert find_video_url(data) == "https://cdn/next.mp4"

    @pytest.mark.parametrize("value", [None, True, 0, 1.5, "video_versions", {"video_versions": "x"}])
    def test_given_scalars_or_wrong_shapes_should_return_none(self, value):
        """标量或形状不符时应返回 None。"""
        assert find_video_url(value) is None
