

def test_compile():
    import webmercator_dist
    import webmercator_dist.cli
    import webmercator_dist.conversion
    import webmercator_dist.meridian
    import webmercator_dist.projection
    import webmercator_dist.scan

    assert webmercator_dist.LOGGER.name == 'webmercator_dist'
