# lets pytest import `suite` and `combidex_tests` from the repository root
