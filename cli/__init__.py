'''rebed 명령줄 패키지(KR). rebed command line package (EN).'''
