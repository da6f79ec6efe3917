import json

import pytest

from app.cache.live_station_cache import LiveStationCache, build_cache_key
from app.exception.api.directory_exception import DirectoryError


class TestBuildCacheKey:

    def test_key_format(self):
        assert build_cache_key(50, "Jazz") == "radioStations:limit=50:name=Jazz:tag="

    def test_omitted_and_empty_are_same_key(self):
        assert build_cache_key(50, "Jazz", "") == build_cache_key(50, "Jazz", None)
        assert build_cache_key(100, "", "") == build_cache_key(100)

    def test_different_params_different_keys(self):
        keys = {
            build_cache_key(50, "Jazz"),
            build_cache_key(51, "Jazz"),
            build_cache_key(50, "Rock"),
            build_cache_key(50, "Jazz", "jazz"),
        }
        assert len(keys) == 4

    def test_separator_characters_do_not_collide(self):
        """값 안의 구분자(:, =)가 다른 조건의 키와 겹치지 않아야 함"""
        assert build_cache_key(50, "x:tag=", "") != build_cache_key(50, "x", ":tag=")
        assert build_cache_key(50, "a:b") == "radioStations:limit=50:name=a%3Ab:tag="


class TestSearch:

    @pytest.mark.asyncio
    async def test_second_call_hits_cache(self, live_station_cache, station_directory):
        """TTL 내 같은 조건 두 번 호출 시 디렉토리는 한 번만 호출"""
        first = await live_station_cache.search(limit=50, name="Jazz")
        second = await live_station_cache.search(limit=50, name="Jazz")

        assert first == second
        assert station_directory.calls == [(50, "Jazz", None)]

    @pytest.mark.asyncio
    async def test_separator_in_name_is_not_served_other_search(self, live_station_cache, station_directory):
        """name에 구분자가 들어간 검색과 tag 검색은 서로 다른 캐시 항목을 사용"""
        await live_station_cache.search(limit=50, name="x:tag=")
        await live_station_cache.search(limit=50, name="x", tag=":tag=")

        assert station_directory.calls == [(50, "x:tag=", None), (50, "x", ":tag=")]

    @pytest.mark.asyncio
    async def test_writes_with_ttl(self, live_station_cache, cache_backend):
        stations = await live_station_cache.search(limit=50, name="Jazz")

        key = "radioStations:limit=50:name=Jazz:tag="
        assert json.loads(cache_backend.store[key]) == stations
        assert cache_backend.ttls[key] == 3600

    @pytest.mark.asyncio
    async def test_default_limit(self, live_station_cache, station_directory, cache_backend):
        await live_station_cache.search()

        assert station_directory.calls == [(100, None, None)]
        assert "radioStations:limit=100:name=:tag=" in cache_backend.store

    @pytest.mark.asyncio
    async def test_empty_filters_are_not_sent(self, live_station_cache, station_directory):
        await live_station_cache.search(limit=10, name="", tag="")

        assert station_directory.calls == [(10, None, None)]

    @pytest.mark.asyncio
    async def test_cache_get_failure_falls_back(self, live_station_cache, station_directory, cache_backend):
        cache_backend.fail_get = True

        stations = await live_station_cache.search(limit=50)

        assert len(stations) == 2
        assert len(station_directory.calls) == 1

    @pytest.mark.asyncio
    async def test_cache_set_failure_is_swallowed(self, live_station_cache, cache_backend):
        cache_backend.fail_set = True

        stations = await live_station_cache.search(limit=50)

        assert len(stations) == 2
        assert cache_backend.store == {}

    @pytest.mark.asyncio
    async def test_undecodable_entry_is_a_miss(self, live_station_cache, station_directory, cache_backend):
        cache_backend.store[build_cache_key(50)] = "{not json"

        stations = await live_station_cache.search(limit=50)

        assert len(stations) == 2
        assert len(station_directory.calls) == 1

    @pytest.mark.asyncio
    async def test_directory_error_propagates(self, cache_backend, station_directory):
        station_directory.error = DirectoryError()
        cache = LiveStationCache(station_directory, cache_backend)

        with pytest.raises(DirectoryError):
            await cache.search(limit=50)

        assert cache_backend.store == {}

    @pytest.mark.asyncio
    async def test_without_backend(self, station_directory):
        cache = LiveStationCache(station_directory, None)

        await cache.search(limit=5)
        await cache.search(limit=5)

        assert len(station_directory.calls) == 2
