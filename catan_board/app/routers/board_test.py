"""Integration tests for the board HTTP router."""

from __future__ import annotations

import unittest

import fastapi.testclient

from catan_board.app import main


class TestBoardRouter(unittest.TestCase):
    """Tests for the board generation routes."""

    def setUp(self) -> None:
        self.client = fastapi.testclient.TestClient(main.app)

    def test_generate_board(self) -> None:
        """GET /api/board returns a complete board."""
        resp = self.client.get('/api/board', params={'seed': 1})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data['layout']['cells']), 19)
        self.assertEqual(len(data['ports']), 9)
        self.assertEqual(len(data['stats']), 5)
        self.assertTrue(data['rules']['prevent_high_adjacency'])

    def test_seed_is_reproducible(self) -> None:
        first = self.client.get('/api/board', params={'seed': 8}).json()
        second = self.client.get('/api/board', params={'seed': 8}).json()
        self.assertEqual(first, second)

    def test_rule_parameters(self) -> None:
        resp = self.client.get(
            '/api/board',
            params={
                'prevent_high_adjacency': 'false',
                'prevent_clumping': 'true',
                'clumping_mode': 'cluster',
                'fixed_ports': 'true',
                'seed': 2,
            },
        )
        self.assertEqual(resp.status_code, 200)
        rules = resp.json()['rules']
        self.assertFalse(rules['prevent_high_adjacency'])
        self.assertTrue(rules['prevent_extreme_adjacency'])
        self.assertTrue(rules['prevent_clumping'])
        self.assertEqual(rules['clumping_mode'], 'cluster')

    def test_fixed_ports(self) -> None:
        resp = self.client.get('/api/board', params={'fixed_ports': 'true'})
        ports = resp.json()['ports']
        self.assertEqual(ports['0']['port_type'], 'generic')
        self.assertEqual(ports['0']['ratio'], '3:1')
        self.assertEqual(ports['16']['port_type'], 'ore')
        self.assertEqual(ports['16']['angle'], 150)

    def test_exhaustion_returns_409(self) -> None:
        """No layout within the attempt cap is reported as a conflict."""
        resp = self.client.get('/api/board', params={'max_attempts': 0})
        self.assertEqual(resp.status_code, 409)
        self.assertIn('Could not generate', resp.json()['detail'])

    def test_negative_attempts_rejected(self) -> None:
        resp = self.client.get('/api/board', params={'max_attempts': -1})
        self.assertEqual(resp.status_code, 400)
        self.assertIn('max_attempts', resp.json()['detail'])

    def test_unknown_clumping_mode_rejected(self) -> None:
        resp = self.client.get('/api/board', params={'clumping_mode': 'blob'})
        self.assertEqual(resp.status_code, 422)

    def test_rule_defaults(self) -> None:
        resp = self.client.get('/api/board/rules')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(
            data['rules'],
            {
                'prevent_high_adjacency': True,
                'prevent_extreme_adjacency': True,
                'prevent_clumping': False,
                'clumping_mode': 'adjacent',
                'fixed_ports': False,
            },
        )
        self.assertGreater(data['max_attempts'], 0)

    def test_health(self) -> None:
        resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {'status': 'healthy'})


if __name__ == '__main__':
    unittest.main()
