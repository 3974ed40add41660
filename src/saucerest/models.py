from datetime import datetime
from typing import List, Dict, Optional
from pydantic import BaseModel, Field, RootModel

# --- Real Device Models ---

class Screenshot(BaseModel):
    id: Optional[str] = None
    url: str

class DeviceJob(BaseModel):
    """
    A single test run on a real device. The asset URL fields stay null until
    the asset has been processed server side.
    """

    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    device_name: Optional[str] = None
    device_descriptor: Optional[str] = None
    os: Optional[str] = None
    os_version: Optional[str] = None
    automation_backend: Optional[str] = None
    creation_time: Optional[datetime] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    error: Optional[str] = None
    passed: Optional[bool] = None

    video_url: Optional[str] = None
    network_log_url: Optional[str] = None
    framework_log_url: Optional[str] = None
    device_log_url: Optional[str] = None
    requests_url: Optional[str] = None
    testfairy_log_url: Optional[str] = None
    crash_log_url: Optional[str] = None
    screenshots: Optional[List[Screenshot]] = None

class DeviceJobsMetaData(BaseModel):
    offset: Optional[int] = None
    limit: Optional[int] = None
    more_available: Optional[bool] = Field(None, alias="moreAvailable")

class DeviceJobs(BaseModel):
    entities: List[DeviceJob]
    meta_data: Optional[DeviceJobsMetaData] = Field(None, alias="metaData")

class Device(BaseModel):
    descriptor: str
    name: Optional[str] = None
    os: Optional[str] = None
    os_version: Optional[str] = Field(None, alias="osVersion")
    manufacturer: Optional[List[str]] = None
    api_level: Optional[int] = Field(None, alias="apiLevel")
    abi_type: Optional[str] = Field(None, alias="abiType")
    cpu_cores: Optional[int] = Field(None, alias="cpuCores")
    ram_size: Optional[int] = Field(None, alias="ramSize")
    screen_size: Optional[float] = Field(None, alias="screenSize")
    is_private: Optional[bool] = Field(None, alias="isPrivate")
    is_tablet: Optional[bool] = Field(None, alias="isTablet")

class AvailableDevices(RootModel[List[str]]):
    pass

class ConcurrencyCurrent(BaseModel):
    in_use_devices: int = Field(..., alias="inUseDevices")

class ConcurrencyAllowed(BaseModel):
    devices: int

class ConcurrencyOrganization(BaseModel):
    id: Optional[str] = None
    current: ConcurrencyCurrent
    allowed: ConcurrencyAllowed

class Concurrency(BaseModel):
    organization: ConcurrencyOrganization

# --- Platform Models ---

class TestStatus(BaseModel):
    wait_time: float
    service_operational: bool
    status_message: str

class Platform(BaseModel):
    short_version: Optional[str] = None
    long_name: Optional[str] = None
    api_name: Optional[str] = None
    long_version: Optional[str] = None
    latest_stable_version: Optional[str] = None
    automation_backend: Optional[str] = None
    os: Optional[str] = None
    device: Optional[str] = None

class EndOfLifeAppiumVersions(RootModel[Dict[str, Optional[int]]]):
    """
    Maps each supported Appium version to its end of life date as a Unix timestamp.
    """

# --- Storage Models ---

class Owner(BaseModel):
    id: str
    org_id: Optional[str] = None

class Metadata(BaseModel):
    identifier: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None
    is_test_runner: Optional[bool] = None
    icon: Optional[str] = None
    short_version: Optional[str] = None
    is_simulator: Optional[bool] = None
    min_os: Optional[str] = None
    target_os: Optional[str] = None

class Access(BaseModel):
    team_ids: List[str] = []
    org_ids: List[str] = []

class Item(BaseModel):
    id: str
    owner: Optional[Owner] = None
    name: str
    upload_timestamp: Optional[int] = None
    etag: Optional[str] = None
    kind: Optional[str] = None
    group_id: Optional[int] = None
    size: Optional[int] = None
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    access: Optional[Access] = None
    sha256: Optional[str] = None
    tags: List[str] = []

class StorageLinks(BaseModel):
    prev: Optional[str] = None
    next: Optional[str] = None
    self_link: Optional[str] = Field(None, alias="self")

class StorageFiles(BaseModel):
    items: List[Item]
    links: Optional[StorageLinks] = None
    page: Optional[int] = None
    per_page: Optional[int] = None
    total_items: Optional[int] = None

# --- Account Models ---

class Organization(BaseModel):
    id: str
    name: str

class TeamSetting(BaseModel):
    live_only: bool
    real_devices: int
    virtual_machines: int

class Group(BaseModel):
    id: str
    name: str

class Team(BaseModel):
    id: str
    settings: Optional[TeamSetting] = None
    group: Optional[Group] = None
    is_default: bool
    name: str
    org_uuid: str

class Role(BaseModel):
    name: str
    role: int

class ResultItem(BaseModel):
    """
    Represents a single user returned by the user lookup.
    """
    id: str
    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_active: bool
    organization: Organization
    roles: List[Role]
    teams: List[Team]

class LookupUsersLinks(BaseModel):
    next: Optional[str]
    previous: Optional[str]
    first: Optional[str]
    last: Optional[str]

class LookupUsers(BaseModel):
    links: LookupUsersLinks
    count: int
    results: List[ResultItem]

class LookupTeamsResponse(BaseModel):
    links: LookupUsersLinks
    count: int
    results: List[Team]

# --- Sauce Connect Models ---

class Download(BaseModel):
    download_url: str
    sha1: Optional[str] = None

class Downloads(BaseModel):
    linux: Optional[Download] = None
    linux_arm64: Optional[Download] = Field(None, alias="linux-arm64")
    osx: Optional[Download] = None
    win32: Optional[Download] = None

class Versions(BaseModel):
    latest_version: str
    info_url: Optional[str] = None
    warning: Optional[str] = None
    downloads: Downloads
