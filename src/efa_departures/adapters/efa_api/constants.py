"""Constants for the EFA departure monitor (XSLT_DM_REQUEST) interface."""

# Fixed form parameters of a departure monitor request.
# The per-request ones (name, place, type, date, time) are added by build_dm_form.
DM_FORM_DEFAULTS: dict[str, str] = {
    "command": "",
    "deleteAssignedStops_dm": "1",
    "help": "Hilfe",
    "itdLPxx_id_dm": ":dm",
    "itdLPxx_mapState_dm": "",
    "itdLPxx_mdvMap2_dm": "",
    "itdLPxx_mdvMap_dm": "3406199:401077:NAV3",
    "itdLPxx_transpCompany": "vrr",
    "itdLPxx_view": "",
    "language": "de",
    "mode": "direct",
    "nameInfo_dm": "invalid",
    "nameState_dm": "empty",
    "placeInfo_dm": "invalid",
    "placeState_dm": "empty",
    "ptOptionsActive": "1",
    "requestID": "0",
    "sessionID": "0",
    "submitButtondm": "",
    "typeInfo_dm": "invalid",
    "useProxFootSearch": "0",
    "useRealtime": "1",
}

DEFAULT_LOCATION_TYPE = "stop"

# itdNoTrain@delay value the service uses for cancelled trips
CANCELLED_DELAY = -9999

# itdOdvPlace / itdOdvName states
ODV_STATE_LIST = "list"
ODV_STATE_NOT_IDENTIFIED = "notidentified"
