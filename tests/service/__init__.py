"""
Houses the tests for the service layer of the program. This layer is what manages the internal API, and is
what any caller should use to speak through when communicating with the rest of the system.

Asynchronous tests run on the loop provided by ``aiohttp.pytest_plugin`` and get a fresh database per test.
"""
