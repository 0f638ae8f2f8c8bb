
def test_compile():
    import georeference.config
    import georeference.coordinates
    import georeference.ellipsoid
    import georeference.geodesy
    import georeference.lines
    import georeference.loxodromic
    import georeference.meridional
    import georeference.orthodromic
    import georeference.tracks
