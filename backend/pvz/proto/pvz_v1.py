# Overview: pvz.v1 protobuf messages, registered in the default descriptor pool.

"""
pvz.v1 message classes

Mirrors pvz_v1.proto (shipped next to this module for client code
generation). The file descriptor is assembled with descriptor_pb2 and
added to the default pool, so message classes, server reflection and any
generated client agree on one wire contract:

    message PVZ                { string id = 1;
                                 google.protobuf.Timestamp registration_date = 2;
                                 string city = 3; }
    message GetPVZListRequest  {}
    message GetPVZListResponse { repeated PVZ pvzs = 1; }
    service PVZService         { rpc GetPVZList(GetPVZListRequest)
                                     returns (GetPVZListResponse); }
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf import timestamp_pb2


FILE_NAME = "pvz/v1/pvz.proto"
PACKAGE = "pvz.v1"

SERVICE_NAME = f"{PACKAGE}.PVZService"
GET_PVZ_LIST = "GetPVZList"
GET_PVZ_LIST_PATH = f"/{SERVICE_NAME}/{GET_PVZ_LIST}"

_Field = descriptor_pb2.FieldDescriptorProto


def _build_file_proto() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=FILE_NAME,
        package=PACKAGE,
        syntax="proto3",
        dependency=[timestamp_pb2.DESCRIPTOR.name],
    )

    pvz = file_proto.message_type.add(name="PVZ")
    pvz.field.add(
        name="id", json_name="id", number=1,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )
    pvz.field.add(
        name="registration_date", json_name="registrationDate", number=2,
        type=_Field.TYPE_MESSAGE, label=_Field.LABEL_OPTIONAL,
        type_name=".google.protobuf.Timestamp",
    )
    pvz.field.add(
        name="city", json_name="city", number=3,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )

    file_proto.message_type.add(name="GetPVZListRequest")

    response = file_proto.message_type.add(name="GetPVZListResponse")
    response.field.add(
        name="pvzs", json_name="pvzs", number=1,
        type=_Field.TYPE_MESSAGE, label=_Field.LABEL_REPEATED,
        type_name=f".{PACKAGE}.PVZ",
    )

    service = file_proto.service.add(name="PVZService")
    service.method.add(
        name=GET_PVZ_LIST,
        input_type=f".{PACKAGE}.GetPVZListRequest",
        output_type=f".{PACKAGE}.GetPVZListResponse",
    )

    return file_proto


_pool = descriptor_pool.Default()
_pool.AddSerializedFile(_build_file_proto().SerializeToString())

DESCRIPTOR = _pool.FindFileByName(FILE_NAME)

PVZ = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["PVZ"])
GetPVZListRequest = message_factory.GetMessageClass(
    DESCRIPTOR.message_types_by_name["GetPVZListRequest"]
)
GetPVZListResponse = message_factory.GetMessageClass(
    DESCRIPTOR.message_types_by_name["GetPVZListResponse"]
)
