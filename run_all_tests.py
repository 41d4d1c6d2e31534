"""Test Summary Script - Runs each app's tests and reports a per-app tally"""
import re
import subprocess
import sys

# Test packages of the HR platform
TEST_MODULES = [
    'core.user_accounts.tests',
    'HR.evaluation.tests',
]


def _count(pattern, output):
    match = re.search(pattern, output)
    return int(match.group(1)) if match else 0


def run_tests(module, keepdb=False):
    """Run ``manage.py test`` for one module and parse the outcome"""
    command = [sys.executable, 'manage.py', 'test', module, '-v', '0']
    if keepdb:
        command.append('--keepdb')

    try:
        result = subprocess.run(command, capture_output=True, text=True, timeout=300)
    except subprocess.TimeoutExpired:
        return {'module': module, 'total': 0, 'failed': 0, 'status': 'TIMEOUT'}

    output = result.stdout + result.stderr
    total = _count(r'Ran (\d+) test', output)
    if not total:
        return {'module': module, 'total': 0, 'failed': 0, 'status': 'NO TESTS'}

    failed = _count(r'failures=(\d+)', output) + _count(r'errors=(\d+)', output)
    return {
        'module': module,
        'total': total,
        'failed': failed,
        'status': 'FAILED' if result.returncode else 'OK',
    }


def main():
    keepdb = '--keepdb' in sys.argv[1:]

    print("=" * 80)
    print("HR PLATFORM TEST SUITE SUMMARY")
    print("=" * 80)

    results = []
    for module in TEST_MODULES:
        print(f"Running {module}...", end=' ', flush=True)
        result = run_tests(module, keepdb=keepdb)
        results.append(result)
        print(f"{result['status']} - {result['total']} tests")

    total_tests = sum(result['total'] for result in results)
    total_failed = sum(result['failed'] for result in results)

    print()
    print("=" * 80)
    print(f"Total Tests: {total_tests}")
    print(f"Passed: {total_tests - total_failed}")
    print(f"Failed: {total_failed}")
    print("-" * 80)
    for result in results:
        marker = "OK  " if result['status'] == 'OK' else "FAIL"
        passed = result['total'] - result['failed']
        print(f"{marker} {result['module']:50} {passed:4}/{result['total']:4} passed")
    print("=" * 80)

    failing = any(result['status'] != 'OK' for result in results)
    sys.exit(1 if failing else 0)


if __name__ == '__main__':
    main()
