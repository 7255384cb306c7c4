from pydantic import BaseModel, ConfigDict


# 1. 패키지 changelog에서 추출한 최신 릴리스 섹션
class ReleaseSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    package_name: str
    version: str
    body: str  # 버전 헤더부터 다음 버전 헤더 직전까지 (앞뒤 공백 제거)

    def to_package_info(self) -> "PackageInfo":
        return PackageInfo(name=self.package_name, version=self.version)


# 2. 워크플로우에 넘겨주는 packages-info JSON 항목
class PackageInfo(BaseModel):
    name: str
    version: str
