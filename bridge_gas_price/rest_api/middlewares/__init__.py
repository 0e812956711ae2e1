from bridge_gas_price.rest_api.middlewares.route_logger import RouteLoggerMiddleware

__all__ = ['RouteLoggerMiddleware']
