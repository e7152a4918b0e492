"""
flutter-clean test suite
========================

Test Modules
------------
- test_models.py: Tests for the configuration model and choice enums
- test_resolver.py: Tests for input normalization
- test_planner.py: Tests for layout planning
- test_dependencies.py: Tests for pub dependency resolution and install
- test_generator.py: Tests for filesystem application and documents
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_planner.py

    # Run specific test class
    pytest tests/test_planner.py::TestScenarios
"""
