# Overview: gRPC surface exposing the unfiltered pickup-point list for other services.

"""
gRPC PVZ Service

Service:  pvz.v1.PVZService (proto/pvz_v1.proto)
Method:   GetPVZList (unary-unary)

Returns at most pvz_service.GRPC_LIST_LIMIT pickup points, newest first,
with no date filter and no authentication. Server reflection is enabled
so tools like grpcurl can discover the contract.
"""

from __future__ import annotations

import logging
from concurrent import futures

import grpc
from grpc_reflection.v1alpha import reflection

from .proto import pvz_v1
from .proto.pvz_v1 import GET_PVZ_LIST, GET_PVZ_LIST_PATH, SERVICE_NAME
from .services import pvz_service


logger = logging.getLogger(__name__)


class PVZServicer:
    """Runs each call inside an app context so db.session is available."""

    def __init__(self, app):
        self.app = app

    def GetPVZList(self, request, context):
        with self.app.app_context():
            try:
                pickup_points = pvz_service.list_all_pickup_points()
            except Exception:
                logger.exception("GetPVZList failed")
                context.abort(grpc.StatusCode.INTERNAL, "failed to get pvz list")

            response = pvz_v1.GetPVZListResponse()
            for pickup_point in pickup_points:
                item = response.pvzs.add(id=pickup_point.id, city=pickup_point.city)
                # Stored naive, meaning UTC
                item.registration_date.FromDatetime(pickup_point.registration_date)
            return response


class PVZServiceStub:
    """Client for pvz.v1.PVZService."""

    def __init__(self, channel):
        self.GetPVZList = channel.unary_unary(
            GET_PVZ_LIST_PATH,
            request_serializer=pvz_v1.GetPVZListRequest.SerializeToString,
            response_deserializer=pvz_v1.GetPVZListResponse.FromString,
        )


def build_handler(servicer: PVZServicer):
    return grpc.method_handlers_generic_handler(
        SERVICE_NAME,
        {
            GET_PVZ_LIST: grpc.unary_unary_rpc_method_handler(
                servicer.GetPVZList,
                request_deserializer=pvz_v1.GetPVZListRequest.FromString,
                response_serializer=pvz_v1.GetPVZListResponse.SerializeToString,
            ),
        },
    )


def create_server(app, address: str | None = None, max_workers: int = 10):
    """
    Build a grpc.Server bound to address (default [::]:GRPC_PORT).

    Returns (server, bound_port); the server is not started.
    """
    if address is None:
        address = f"[::]:{app.config['GRPC_PORT']}"

    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    server.add_generic_rpc_handlers((build_handler(PVZServicer(app)),))
    reflection.enable_server_reflection((SERVICE_NAME, reflection.SERVICE_NAME), server)
    port = server.add_insecure_port(address)
    return server, port


def serve(app, address: str | None = None) -> None:
    """Start the server and block until it terminates."""
    server, port = create_server(app, address)
    server.start()
    logger.info("Starting gRPC server on port %s", port)
    try:
        server.wait_for_termination()
    finally:
        server.stop(grace=5)
