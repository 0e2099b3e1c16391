"""
목적: 외부 저장소 통합 모듈의 루트 패키지이다.
설명: 하위 db 패키지를 통해 MongoDB 연동 구현을 제공한다.
디자인 패턴: 패키지 구조화
참조: src/metadata_store/integrations/db
"""
