"""
Cart serializers.
"""
from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    """Serializer for cart line output."""
    product_id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    image = serializers.CharField(read_only=True)
    team = serializers.CharField(read_only=True)
    size = serializers.CharField(read_only=True)
    custom_name = serializers.CharField(read_only=True, allow_null=True)
    custom_number = serializers.CharField(read_only=True, allow_null=True)
    quantity = serializers.IntegerField(read_only=True)
    subtotal = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    items = CartLineSerializer(many=True, read_only=True)
    is_open = serializers.BooleanField(read_only=True)
    total = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    item_count = serializers.IntegerField(read_only=True)


class CartItemKeySerializer(serializers.Serializer):
    """
    Identifies cart lines.

    Leaving out ``custom_name`` / ``custom_number`` matches any
    personalization; sending ``null`` matches only plain lines.
    """
    product_id = serializers.CharField(max_length=64)
    size = serializers.CharField(max_length=10)
    custom_name = serializers.CharField(
        max_length=50, required=False, allow_null=True, allow_blank=True, trim_whitespace=False,
    )
    custom_number = serializers.CharField(
        max_length=10, required=False, allow_null=True, allow_blank=True, trim_whitespace=False,
    )


class CartItemCreateSerializer(CartItemKeySerializer):
    """
    Serializer for adding one unit to the cart.

    With ``name`` and ``unit_price`` the line is taken as given; otherwise
    display data is copied from the catalog record.
    """
    name = serializers.CharField(max_length=255, required=False)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    team = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')

    @property
    def is_self_describing(self) -> bool:
        data = self.validated_data
        return 'name' in data and 'unit_price' in data
