# encoding: utf-8

from mo_logs import Log

from mo_scanning import ParseError


def runTests(parse, tests, failureTests=False):
    """
    Run parse on each line of tests, logging each result, or the error report

    Parameters:
     - parse - function that accepts a string
     - tests - a list of separate test strings, or a multiline string of test strings
     - failureTests - (default= ``False``) indicates if these tests are expected to fail parsing

    Lines starting with ``#`` are comments.  Returns a list of (test, result)
    tuples, where result is the ParseError for failed tests.
    """
    if isinstance(tests, str):
        tests = list(map(str.strip, tests.rstrip().splitlines()))

    allResults = []
    for t in tests:
        if t.startswith("#"):
            Log.note(t)
            continue
        if not t:
            continue
        try:
            result = parse(t)
        except ParseError as pe:
            if not failureTests:
                Log.error("FAIL on {{test|quote}}", test=t, cause=pe)
            Log.note("{{test}}\n{{report}}", test=t, report=str(pe))
            result = pe
        else:
            if failureTests:
                Log.error("EXPECTING FAIL on {{test|quote}}", test=t)
            Log.note("{{test}} => {{result}}", test=t, result=result)
        allResults.append((t, result))

    return allResults
