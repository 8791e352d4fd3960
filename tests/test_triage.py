"""Unit tests for candidate filtering and ranking."""
import pytest

from radarr_transcode.catalog import EncodedFile, MediaAsset
from radarr_transcode.triage import is_candidate, movie_size, rank_candidates
from helpers import make_movie


class TestIsCandidate:
    @pytest.mark.parametrize("codec", ["h264", "x264", "mpeg4", "VC1", "AV1"])
    def test_non_hevc_codecs_are_candidates(self, codec):
        assert is_candidate(make_movie("m", 100, codec))

    @pytest.mark.parametrize("codec", ["x265", "h265"])
    def test_hevc_codecs_are_excluded(self, codec):
        assert not is_candidate(make_movie("m", 100, codec))

    def test_movie_without_file_is_excluded(self):
        assert not is_candidate(make_movie("m"))

    def test_file_without_codec_is_excluded(self):
        assert not is_candidate(make_movie("m", 100, codec=None))

    def test_empty_codec_counts_as_present(self):
        assert is_candidate(make_movie("m", 100, codec=""))


class TestRanking:
    def test_orders_largest_first(self):
        movies = [make_movie("small", 10), make_movie("big", 1000), make_movie("mid", 500)]

        ranked = rank_candidates(movies)

        assert [m.title for m in ranked] == ["big", "mid", "small"]

    def test_movies_without_file_rank_last(self):
        movies = [make_movie("none"), make_movie("tiny", 1), make_movie("big", 1000)]

        ranked = rank_candidates(movies)

        assert [m.title for m in ranked] == ["big", "tiny", "none"]
        assert movie_size(ranked[-1]) == 0

    def test_does_not_mutate_input(self):
        movies = [make_movie("a", 1), make_movie("b", 2)]
        original = list(movies)

        ranked = rank_candidates(movies)

        assert movies == original
        assert ranked is not movies

    def test_sizes_are_non_increasing(self):
        movies = [make_movie(str(i), size) for i, size in enumerate([5, 3, 5, 0, 9, 1, 9])]

        sizes = [movie_size(m) for m in rank_candidates(movies)]

        assert sizes == sorted(sizes, reverse=True)

    def test_equal_sizes_do_not_fail(self):
        movies = [make_movie("a", 7), make_movie("b", 7)]

        assert {m.title for m in rank_candidates(movies)} == {"a", "b"}

    def test_empty(self):
        assert rank_candidates([]) == []


def test_movie_size_reads_encoded_file():
    movie = MediaAsset("m", "/movies/m", EncodedFile("/movies/m/m.mkv", 4096, "h264"))

    assert movie_size(movie) == 4096
