

def test_compile():
    import uvoxid
    import uvoxid.address
    import uvoxid.area
    import uvoxid.conversion
    import uvoxid.delta
    import uvoxid.distance
    import uvoxid.errors
    import uvoxid.geometry
    import uvoxid.orientation
    import uvoxid.tolerance

    assert uvoxid.UvoxId is uvoxid.address.UvoxId
