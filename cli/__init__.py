# cli - aws-ranges 명령줄 인터페이스
