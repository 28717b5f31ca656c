"""
Integration tests for API routes.

Tests for the photo CRUD endpoints and the view/video endpoints.
"""

import json

import pytest

from progress_tracker.storage import PhotoStore

from conftest import requires_video_writer


class TestIndex:
    """Test suite for the web interface and health check."""

    def test_index_route(self, client):
        """Test that index page loads correctly."""
        response = client.get('/')
        assert response.status_code == 200
        assert b'<html' in response.data

    def test_health_check(self, client, photo_payload):
        """Test that health check reports the stored photo count."""
        client.post('/api/photos', json=photo_payload())
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json() == {'status': 'healthy', 'photos': 1}


class TestPhotoRoutes:
    """Test suite for /api/photos."""

    def test_list_empty(self, client):
        """Test that listing an empty store returns an empty array."""
        response = client.get('/api/photos')
        assert response.status_code == 200
        assert response.get_json() == []

    def test_create_then_get(self, client, photo_payload):
        """Test that a created photo can be fetched back unchanged."""
        payload = photo_payload()
        response = client.post('/api/photos', json=payload)
        assert response.status_code == 201

        created = response.get_json()
        assert created['id']
        assert created['createdAt']
        for key in ('type', 'weight', 'notes', 'filename', 'fileData'):
            assert created[key] == payload[key]
        assert created['date'] == '2024-01-01T00:00:00Z'

        fetched = client.get(f"/api/photos/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.get_json() == created

    def test_create_without_optional_fields(self, client, photo_payload):
        """Test that omitted weight and notes come back as null."""
        payload = photo_payload()
        del payload['weight']
        del payload['notes']
        created = client.post('/api/photos', json=payload).get_json()
        assert created['weight'] is None
        assert created['notes'] is None

    def test_create_ignores_client_id(self, client, photo_payload):
        """Test that a client-supplied id is replaced by the server."""
        created = client.post('/api/photos', json=photo_payload(id='mine')).get_json()
        assert created['id'] != 'mine'

    def test_create_missing_filename(self, client, photo_payload):
        """Test create with missing filename field."""
        payload = photo_payload()
        del payload['filename']
        response = client.post('/api/photos', json=payload)

        assert response.status_code == 400
        data = response.get_json()
        assert data['message'] == 'Validation error'
        assert len(data['errors']) > 0
        assert data['errors'][0]['path'] == ['filename']

    @pytest.mark.parametrize('overrides', [
        {'type': 'sideways'},
        {'date': 'yesterday'},
        {'weight': 'heavy'},
        {'fileData': ''},
    ])
    def test_create_invalid_fields(self, client, photo_payload, overrides):
        """Test create with invalid field values."""
        response = client.post('/api/photos', json=photo_payload(**overrides))
        assert response.status_code == 400
        assert response.get_json()['errors']

    def test_create_malformed_json(self, client):
        """Test create with invalid JSON."""
        response = client.post('/api/photos', data='not json', content_type='application/json')
        assert response.status_code == 400
        assert response.get_json()['errors']

    def test_list_sorted_by_date_descending(self, client, photo_payload):
        """Test that photos are listed newest first."""
        for day in ('2024-01-01', '2024-03-01', '2024-02-01'):
            client.post('/api/photos', json=photo_payload(date=f'{day}T08:00:00Z'))

        dates = [photo['date'][:10] for photo in client.get('/api/photos').get_json()]
        assert dates == ['2024-03-01', '2024-02-01', '2024-01-01']

    def test_get_unknown(self, client):
        """Test that an unknown id returns 404."""
        response = client.get('/api/photos/missing')
        assert response.status_code == 404
        assert response.get_json() == {'message': 'Photo not found'}

    def test_patch_updates_fields(self, client, photo_payload):
        """Test that a partial update merges the given fields."""
        created = client.post('/api/photos', json=photo_payload()).get_json()
        response = client.patch(f"/api/photos/{created['id']}", json={'weight': 88.5, 'type': 'profile'})

        assert response.status_code == 200
        updated = response.get_json()
        assert updated['weight'] == 88.5
        assert updated['type'] == 'profile'
        assert updated['notes'] == created['notes']
        assert updated['createdAt'] == created['createdAt']

    def test_patch_empty_body_is_noop(self, client, photo_payload):
        """Test that an empty update leaves the photo unchanged."""
        created = client.post('/api/photos', json=photo_payload()).get_json()
        response = client.patch(f"/api/photos/{created['id']}", json={})
        assert response.status_code == 200
        assert response.get_json() == created

    def test_patch_can_clear_weight(self, client, photo_payload):
        """Test that weight can be cleared with null."""
        created = client.post('/api/photos', json=photo_payload()).get_json()
        updated = client.patch(f"/api/photos/{created['id']}", json={'weight': None}).get_json()
        assert updated['weight'] is None

    def test_patch_rejects_null_required_field(self, client, photo_payload):
        """Test that required fields cannot be set to null."""
        created = client.post('/api/photos', json=photo_payload()).get_json()
        response = client.patch(f"/api/photos/{created['id']}", json={'type': None})
        assert response.status_code == 400
        assert response.get_json()['errors'][0]['path'] == ['type']

    def test_patch_unknown(self, client):
        """Test update of an unknown photo."""
        response = client.patch('/api/photos/missing', json={'weight': 80})
        assert response.status_code == 404

    def test_delete(self, client, photo_payload):
        """Test that a deleted photo is no longer found."""
        created = client.post('/api/photos', json=photo_payload()).get_json()
        response = client.delete(f"/api/photos/{created['id']}")
        assert response.status_code == 204
        assert response.data == b''
        assert client.get(f"/api/photos/{created['id']}").status_code == 404

    def test_delete_unknown(self, client):
        """Test delete of an unknown photo."""
        assert client.delete('/api/photos/missing').status_code == 404


class _BrokenStore(PhotoStore):
    def list(self):
        raise RuntimeError('disk on fire')


class TestInternalErrors:
    """Test suite for 500 responses."""

    def test_internal_error_hides_details(self):
        """Test that internal failures return a generic 500 message."""
        from run import create_app
        app = create_app(store=_BrokenStore())
        with app.test_client() as client:
            response = client.get('/api/photos')
        assert response.status_code == 500
        data = response.get_json()
        assert data == {'message': 'Failed to fetch photos'}
        assert 'fire' not in json.dumps(data)


class TestViewRoutes:
    """Test suite for gallery, comparison and timeline endpoints."""

    @pytest.fixture
    def journey(self, client, photo_payload):
        first = client.post('/api/photos', json=photo_payload(date='2024-01-01T00:00:00Z', weight=90.0,
                                                               notes='Início')).get_json()
        second = client.post('/api/photos', json=photo_payload(date='2024-01-08T00:00:00Z', weight=88.5,
                                                                type='profile', notes=None)).get_json()
        return first, second

    def test_compare(self, client, journey):
        """Test comparison metrics for a one-week span."""
        first, second = journey
        response = client.get(f"/api/compare?before={first['id']}&after={second['id']}")
        assert response.status_code == 200
        metrics = response.get_json()['metrics']
        assert metrics['daysDiff'] == 7
        assert metrics['weightChange'] == pytest.approx(-1.5)
        assert metrics['weeklyRate'] == pytest.approx(-1.5)

    def test_compare_missing_params(self, client):
        """Test comparison with a missing photo id."""
        response = client.get('/api/compare?before=x')
        assert response.status_code == 400
        assert response.get_json()['errors'][0]['path'] == ['after']

    def test_compare_unknown_photo(self, client, journey):
        """Test comparison with an unknown photo id."""
        response = client.get(f"/api/compare?before={journey[0]['id']}&after=missing")
        assert response.status_code == 404

    def test_timeline(self, client, journey):
        """Test timeline statistics and entries."""
        data = client.get('/api/timeline').get_json()
        assert data['stats']['totalPhotos'] == 2
        assert data['stats']['weightLoss'] == pytest.approx(1.5)
        assert data['entries'][0]['weightChange'] == pytest.approx(-1.5)
        assert data['entries'][1]['isBaseline'] is True

    def test_gallery_filters(self, client, journey):
        """Test gallery type and notes filters."""
        data = client.get('/api/gallery', query_string={'type': 'profile'}).get_json()
        assert data['total'] == 1
        assert data['photos'][0]['type'] == 'profile'

        data = client.get('/api/gallery', query_string={'search': 'início'}).get_json()
        assert data['total'] == 1
        assert data['photos'][0]['weightChangeLabel'] == 'sem mudança'


class TestVideoRoute:
    """Test suite for /api/video."""

    def test_no_photos(self, client):
        """Test video generation with an empty store."""
        response = client.post('/api/video', json={'duration': 1})
        assert response.status_code == 400
        assert 'message' in response.get_json()

    @pytest.mark.parametrize('body', [
        {'duration': 0},
        {'duration': 60},
        {'photoType': 'sideways'},
        {'transition': 'spin'},
    ])
    def test_invalid_settings(self, client, photo_payload, body):
        """Test video generation with invalid settings."""
        client.post('/api/photos', json=photo_payload())
        response = client.post('/api/video', json=body)
        assert response.status_code == 400
        assert response.get_json()['errors']

    def test_undecodable_photo(self, client, photo_payload):
        """Test video generation with a corrupt image payload."""
        client.post('/api/photos', json=photo_payload(fileData='data:image/png;base64,AAAA'))
        response = client.post('/api/video', json={'duration': 0.1, 'quality': '480p'})
        assert response.status_code == 422
        assert response.get_json()['message']

    @requires_video_writer
    def test_generates_download(self, client, photo_payload):
        """Test that a video is returned as an mp4 download."""
        client.post('/api/photos', json=photo_payload(date='2024-01-01T00:00:00Z'))
        client.post('/api/photos', json=photo_payload(date='2024-01-08T00:00:00Z', type='back'))

        response = client.post('/api/video', json={'duration': 0.5, 'quality': '480p', 'includeStats': True})
        assert response.status_code == 200
        assert response.mimetype == 'video/mp4'
        assert 'transformacao-' in response.headers['Content-Disposition']
        assert response.headers['X-Video-Frames'] == '30'
        assert len(response.data) > 0

    @requires_video_writer
    def test_photo_type_filter(self, client, photo_payload):
        """Test that only photos of the chosen type are rendered."""
        client.post('/api/photos', json=photo_payload())
        client.post('/api/photos', json=photo_payload(type='back'))

        response = client.post('/api/video', json={'duration': 0.5, 'quality': '480p', 'photoType': 'back'})
        assert response.status_code == 200
        assert response.headers['X-Video-Frames'] == '15'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
