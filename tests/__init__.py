"""
centralforge test suite
=======================

Test Modules
------------
- test_models.py: Properties parsing and configuration models
- test_renderer.py: Placeholder substitution and template rendering
- test_instructions.py: Fixed instruction documents
- test_keygen.py: gpg key generation
- test_publisher.py: Setup pipeline and init scaffolding
- test_cli.py: Command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_renderer.py

    # Run specific test class
    pytest tests/test_renderer.py::TestSubstitutePlaceholders
"""
