import pytest


@pytest.fixture(autouse=True)
def pkunit_module_under_test(request):
    from pykern import pkunit

    pkunit.module_under_test = request.module
    yield
    pkunit.module_under_test = None


@pytest.fixture(scope="function")
def pkconfig_setup(monkeypatch):
    def res(env=None):
        for k, v in (env or {}).items():
            monkeypatch.setenv(k, v)
        from pykern import pkconfig

        pkconfig.reset_state_for_testing()
        return pkconfig

    yield res
    from pykern import pkconfig

    pkconfig.reset_state_for_testing()
