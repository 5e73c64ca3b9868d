from django.conf import settings
from rest_framework import serializers

DEFAULT_ORDER = 'newest'

CREATED_ORDERINGS = {
    'newest': ('-created_at',),
    'oldest': ('created_at',),
}

PRODUCT_ORDERINGS = {
    **CREATED_ORDERINGS,
    'priceLowest': ('price', '-created_at'),
    'priceHighest': ('-price', '-created_at'),
}


class ListQuerySerializer(serializers.Serializer):
    offset = serializers.IntegerField(min_value=0, default=0)
    limit = serializers.IntegerField(min_value=1, max_value=settings.LIST_MAX_LIMIT, required=False)
    order = serializers.CharField(default=DEFAULT_ORDER)


def apply_list_params(queryset, query_params, orderings=CREATED_ORDERINGS):
    """Order and slice a queryset from ?offset=&limit=&order= query parameters.

    Unknown `order` names fall back to `newest`; a missing `limit` returns
    everything after `offset`.
    """
    params = ListQuerySerializer(data=query_params)
    params.is_valid(raise_exception=True)
    data = params.validated_data

    ordering = orderings.get(data['order'], orderings[DEFAULT_ORDER])
    queryset = queryset.order_by(*ordering)

    offset = data['offset']
    limit = data.get('limit')
    if limit is None:
        return queryset[offset:]
    return queryset[offset:offset + limit]
