from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from records.services import spotify


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def search_music(request):
    """Search Spotify tracks by free text (``?q=``)."""
    query = (request.query_params.get('q') or '').strip()
    if not query:
        return Response({'message': 'q is required', 'success': False}, status=status.HTTP_400_BAD_REQUEST)
    try:
        token = spotify.get_access_token()
    except RuntimeError as e:
        return Response({'message': str(e), 'success': False}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    tracks = spotify.search_tracks(token, query)
    return Response({'message': 'Tracks retrieved', 'success': True, 'tracks': tracks})
