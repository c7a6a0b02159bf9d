"""
End-to-end API test script.
Uses urllib (no external deps needed).

Run against a server started with DEBUG=true (plain-HTTP session
cookie, demo code returned by the confirmation step).
"""

import json
import urllib.error
import urllib.request
from http.cookiejar import CookieJar

BASE = 'http://localhost:8000/api'

opener = urllib.request.build_opener(
    urllib.request.HTTPCookieProcessor(CookieJar()),
)


def api_call(method, url, data=None):
    """Make an API call and return status + body."""
    try:
        if data is not None:
            req = urllib.request.Request(
                url,
                data=json.dumps(data).encode('utf-8'),
                headers={'Content-Type': 'application/json'},
                method=method,
            )
        else:
            req = urllib.request.Request(url, method=method)

        response = opener.open(req)
        body = json.loads(response.read().decode('utf-8'))
        return response.status, body
    except urllib.error.HTTPError as e:
        body = json.loads(e.read().decode('utf-8'))
        return e.code, body


def main():
    print('=' * 60)
    print('LOAN APPLICATION DEMO — END-TO-END API TESTS')
    print('=' * 60)

    # ─── Test 1: Amount preview ───
    print('\n--- TEST 1: POST /api/amount-preview ---')
    status, body = api_call('POST', f'{BASE}/amount-preview', {
        'loan_amount': '1000000',
    })
    print(f'Status: {status}')
    print(f'Response: {json.dumps(body, indent=2, ensure_ascii=False)}')
    assert status == 200, f'Expected 200, got {status}'
    assert body['amount_in_words'] == 'Ten Lakh Rupees.', 'Words wrong'
    assert body['emi'] == 9847, 'EMI wrong'
    print('✓ PASSED')

    # ─── Test 2: Confirmation without an application ───
    print('\n--- TEST 2: GET /api/confirm (no application) ---')
    status, body = api_call('GET', f'{BASE}/confirm')
    print(f'Status: {status}')
    assert status == 409, f'Expected 409, got {status}'
    print('✓ PASSED')

    # ─── Test 3: Invalid application ───
    print('\n--- TEST 3: POST /api/apply (invalid) ---')
    status, body = api_call('POST', f'{BASE}/apply', {
        'full_name': 'Jo Ann',
        'email': 'bad',
        'pan': 'abc',
        'loan_amount': '12a',
    })
    print(f'Status: {status}')
    print(f'Response: {json.dumps(body, indent=2)}')
    assert status == 400, f'Expected 400, got {status}'
    assert len(body['detail']) == 4, 'Expected four field errors'
    print('✓ PASSED')

    # ─── Test 4: Valid application ───
    print('\n--- TEST 4: POST /api/apply ---')
    status, body = api_call('POST', f'{BASE}/apply', {
        'full_name': 'Rahul Sharma',
        'email': 'rahul.sharma@example.com',
        'pan': 'abcde1234f',
        'loan_amount': '500000',
    })
    print(f'Status: {status}')
    assert status == 201, f'Expected 201, got {status}'
    print('✓ PASSED')

    # ─── Test 5: Confirmation ───
    print('\n--- TEST 5: GET /api/confirm ---')
    status, body = api_call('GET', f'{BASE}/confirm')
    print(f'Status: {status}')
    print(f'Response: {json.dumps(body, indent=2)}')
    assert status == 200, f'Expected 200, got {status}'
    assert body['first_name'] == 'Rahul', 'First name wrong'
    assert body['attempts_left'] == 3, 'Attempts wrong'
    code = body.get('demo_code')
    assert code, 'Start the server with OTP_EXPOSE_CODE=true'
    print('✓ PASSED')

    # ─── Test 6: Malformed and wrong codes ───
    print('\n--- TEST 6: POST /api/confirm/verify (malformed, wrong) ---')
    status, body = api_call('POST', f'{BASE}/confirm/verify', {'otp': '12'})
    assert status == 400, f'Expected 400, got {status}'
    status, body = api_call('POST', f'{BASE}/confirm/verify', {'otp': '0000'})
    print(f'Response: {json.dumps(body, indent=2)}')
    assert status == 200 and body['status'] == 'retry', 'Expected retry'
    assert body['attempts_left'] == 2, 'Malformed code consumed an attempt'
    print('✓ PASSED')

    # ─── Test 7: Correct code ───
    print('\n--- TEST 7: POST /api/confirm/verify (correct) ---')
    status, body = api_call('POST', f'{BASE}/confirm/verify', {'otp': code})
    print(f'Response: {json.dumps(body, indent=2)}')
    assert status == 200, f'Expected 200, got {status}'
    assert body['status'] == 'succeeded', 'Expected success'
    assert body['redirect_url'] == 'https://pixel6.co/', 'Redirect wrong'
    print('✓ PASSED')

    print('\n' + '=' * 60)
    print('ALL TESTS PASSED')
    print('=' * 60)


if __name__ == '__main__':
    main()
