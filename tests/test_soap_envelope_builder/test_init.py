"""Test module for soap_envelope_builder package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import soap_envelope_builder

    # Assert
    assert soap_envelope_builder is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import soap_envelope_builder

    # Assert
    assert isinstance(soap_envelope_builder.__version__, str)
    assert soap_envelope_builder.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import soap_envelope_builder

    # Assert
    assert soap_envelope_builder.__author__ == "SOAP Envelope Builder Team"


def test_package_all_exports() -> None:
    """Test that every name in __all__ is importable from the package."""
    # Arrange & Act
    import soap_envelope_builder

    # Assert
    assert "soap_envelope" in soap_envelope_builder.__all__
    assert "SoapXmlSerializer" in soap_envelope_builder.__all__
    for name in soap_envelope_builder.__all__:
        assert hasattr(soap_envelope_builder, name), name


def test_top_level_quick_start() -> None:
    """Test the Level 1 API renders a document."""
    from soap_envelope_builder import soap_envelope, to_xml

    envelope = soap_envelope(lambda env: env.body(lambda body: body.element("ping")))

    assert str(to_xml(envelope, pretty_print=False)).endswith(
        "<soapenv:Body><ping/></soapenv:Body></soapenv:Envelope>"
    )
