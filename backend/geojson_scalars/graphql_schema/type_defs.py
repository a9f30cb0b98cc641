from geojson_scalars.enums import GeoJSONType


TYPE_DEFS = '\n'.join(f'scalar {geojson_type.value}' for geojson_type in GeoJSONType) + '\n'
