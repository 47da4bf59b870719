"""Gateway - 모포 점수 / 프로그램 생성 HTTP API"""
