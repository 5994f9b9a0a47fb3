"""
Entry types e schemas estáticos das tabelas de relatório.

Cada `EntryType` (categoria de relatório WebRTC) corresponde a exatamente
uma tabela no warehouse. `ENTRY_SCHEMAS` associa cada entry type à lista
ordenada de colunas da tabela (nome, tipo primitivo, REQUIRED/NULLABLE),
consumida genericamente pela Task de criação de tabela.

Invariantes:
    - O conjunto de entry types é fechado (13 membros)
    - Todo entry type possui um schema
    - A ordem das colunas é a ordem de criação
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .fields import Schema, boolean, float_, integer, string


class EntryType(str, Enum):
    INITIATED_CALL = "InitiatedCall"
    FINISHED_CALL = "FinishedCall"
    JOINED_PEER_CONNECTION = "JoinedPeerConnection"
    DETACHED_PEER_CONNECTION = "DetachedPeerConnection"
    REMOTE_INBOUND_RTP = "RemoteInboundRTP"
    OUTBOUND_RTP = "OutboundRTP"
    INBOUND_RTP = "InboundRTP"
    ICE_CANDIDATE_PAIR = "ICECandidatePair"
    ICE_LOCAL_CANDIDATE = "ICELocalCandidate"
    ICE_REMOTE_CANDIDATE = "ICERemoteCandidate"
    MEDIA_SOURCE = "MediaSource"
    TRACK = "Track"
    USER_MEDIA_ERROR = "UserMediaError"

    @classmethod
    def parse(cls, name: "str | EntryType") -> "EntryType":
        """Aceita o valor (`InboundRTP`) ou o nome do membro (`INBOUND_RTP`)."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[str(name)]
        except KeyError:
            raise ValueError(f"Unknown entry type: {name!r}") from None

    @property
    def slug(self) -> str:
        """Identificador estável usado no id da Task (`provision.table.<slug>`)."""
        return self.name.lower()


# colunas comuns aos relatórios de peer connection
_PEER_CONNECTION_PREFIX = (
    string("serviceUUID", required=True),
    string("serviceName"),
    string("mediaUnitID"),
    string("callName"),
    string("userID"),
    string("browserID", required=True),
    string("peerConnectionUUID", required=True),
    integer("timestamp", required=True),
)

_MARKER = string("marker")


_CALL_EVENT: Schema = (
    string("serviceUUID", required=True),
    string("serviceName"),
    string("callUUID", required=True),
    string("callName"),
    integer("timestamp", required=True),
    _MARKER,
)

_PEER_CONNECTION_EVENT: Schema = (
    string("serviceUUID", required=True),
    string("serviceName"),
    string("mediaUnitID"),
    string("callUUID", required=True),
    string("callName"),
    string("userID"),
    string("browserID", required=True),
    string("peerConnectionUUID", required=True),
    integer("timestamp", required=True),
    string("timeZone", required=True),
    _MARKER,
)

_USER_MEDIA_ERROR: Schema = (
    string("serviceUUID", required=True),
    string("serviceName"),
    string("mediaUnitID"),
    string("callName"),
    string("userID"),
    string("browserID", required=True),
    string("peerConnectionUUID"),
    integer("timestamp", required=True),
    string("message", required=True),
    _MARKER,
)

_REMOTE_INBOUND_RTP: Schema = _PEER_CONNECTION_PREFIX + (
    integer("ssrc", required=True),
    integer("packetsLost"),
    float_("RTTInMs"),
    float_("jitter"),
    string("codec"),
    string("mediaType"),
    string("transportID", required=True),
    _MARKER,
)

_INBOUND_RTP: Schema = _PEER_CONNECTION_PREFIX + (
    integer("ssrc", required=True),
    integer("bytesReceived"),
    string("decoderImplementation"),
    integer("firCount"),
    integer("framesDecoded"),
    integer("nackCount"),
    integer("headerBytesReceived"),
    integer("keyFramesDecoded"),
    string("mediaType"),
    integer("packetsReceived"),
    integer("pliCount"),
    float_("qpSum"),
    float_("jitter"),
    float_("totalDecodeTime"),
    float_("totalInterFrameDelay"),
    float_("totalSquaredInterFrameDelay"),
    integer("packetsLost"),
    float_("estimatedPlayoutTimestamp"),
    integer("fecPacketsDiscarded"),
    float_("lastPacketReceivedTimestamp"),
    integer("fecPacketsReceived"),
    _MARKER,
)

_OUTBOUND_RTP: Schema = _PEER_CONNECTION_PREFIX + (
    integer("ssrc", required=True),
    integer("bytesSent"),
    string("encoderImplementation"),
    integer("firCount"),
    integer("framesEncoded"),
    integer("nackCount"),
    integer("headerBytesSent"),
    integer("keyFramesEncoded"),
    string("mediaType"),
    integer("packetsSent"),
    integer("pliCount"),
    float_("qpSum"),
    string("qualityLimitationReason"),
    integer("qualityLimitationResolutionChanges"),
    integer("retransmittedBytes"),
    integer("retransmittedPacketsSent"),
    float_("totalEncodeTime"),
    float_("totalPacketSendDelay"),
    integer("totalEncodedBytesTarget"),
    _MARKER,
)

_ICE_CANDIDATE_PAIR: Schema = _PEER_CONNECTION_PREFIX + (
    string("candidatePairID", required=True),
    string("localCandidateID", required=True),
    string("remoteCandidateID", required=True),
    boolean("writable"),
    float_("totalRoundTripTime"),
    string("state"),
    boolean("nominated"),
    integer("availableOutgoingBitrate"),
    integer("bytesReceived"),
    integer("bytesSent"),
    integer("consentRequestsSent"),
    float_("currentRoundTripTime"),
    integer("priority"),
    integer("requestsReceived"),
    integer("requestsSent"),
    integer("responsesReceived"),
    integer("responsesSent"),
    _MARKER,
)

_ICE_LOCAL_CANDIDATE: Schema = _PEER_CONNECTION_PREFIX + (
    string("candidateID", required=True),
    boolean("deleted"),
    string("candidateType"),
    integer("port"),
    string("ipLSH"),
    integer("priority"),
    string("networkType"),
    string("protocol"),
    _MARKER,
)

_ICE_REMOTE_CANDIDATE: Schema = _PEER_CONNECTION_PREFIX + (
    string("candidateID", required=True),
    string("candidateType"),
    boolean("deleted"),
    integer("port"),
    string("ipLSH"),
    integer("priority"),
    string("protocol"),
    _MARKER,
)

_MEDIA_SOURCE: Schema = _PEER_CONNECTION_PREFIX + (
    string("mediaSourceID"),
    float_("framesPerSecond"),
    integer("height"),
    integer("width"),
    float_("audioLevel"),
    string("mediaType"),
    float_("totalAudioEnergy"),
    float_("totalSamplesDuration"),
    _MARKER,
)

_TRACK: Schema = _PEER_CONNECTION_PREFIX + (
    string("trackID"),
    integer("concealedSamples"),
    integer("totalSamplesReceived"),
    integer("silentConcealedSamples"),
    integer("removedSamplesForAcceleration"),
    float_("audioLevel"),
    string("mediaType"),
    float_("totalAudioEnergy"),
    float_("totalSamplesDuration"),
    boolean("remoteSource"),
    float_("jitterBufferEmittedCount"),
    float_("jitterBufferDelay"),
    integer("insertedSamplesForDeceleration"),
    integer("hugeFramesSent"),
    integer("frameWidth"),
    integer("framesSent"),
    integer("framesReceived"),
    integer("framesDropped"),
    integer("framesDecoded"),
    integer("frameHeight"),
    boolean("ended"),
    boolean("detached"),
    integer("concealmentEvents"),
    string("mediaSourceID"),
    _MARKER,
)


ENTRY_SCHEMAS: Mapping[EntryType, Schema] = MappingProxyType({
    EntryType.INITIATED_CALL: _CALL_EVENT,
    EntryType.FINISHED_CALL: _CALL_EVENT,
    EntryType.JOINED_PEER_CONNECTION: _PEER_CONNECTION_EVENT,
    EntryType.DETACHED_PEER_CONNECTION: _PEER_CONNECTION_EVENT,
    EntryType.REMOTE_INBOUND_RTP: _REMOTE_INBOUND_RTP,
    EntryType.OUTBOUND_RTP: _OUTBOUND_RTP,
    EntryType.INBOUND_RTP: _INBOUND_RTP,
    EntryType.ICE_CANDIDATE_PAIR: _ICE_CANDIDATE_PAIR,
    EntryType.ICE_LOCAL_CANDIDATE: _ICE_LOCAL_CANDIDATE,
    EntryType.ICE_REMOTE_CANDIDATE: _ICE_REMOTE_CANDIDATE,
    EntryType.MEDIA_SOURCE: _MEDIA_SOURCE,
    EntryType.TRACK: _TRACK,
    EntryType.USER_MEDIA_ERROR: _USER_MEDIA_ERROR,
})


def schema_for(entry_type: "EntryType | str") -> Schema:
    return ENTRY_SCHEMAS[EntryType.parse(entry_type)]
